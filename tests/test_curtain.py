import time
from types import SimpleNamespace

import pygame
import pytest

from guts_sos.curtain import Curtain, ShowType
from guts_sos.window import set_window


class Timeline:
    def __init__(self):
        self.now = 0.0

    def advance(self, seconds):
        self.now += seconds

    def step(self, curtain, seconds):
        self.advance(seconds)
        curtain.update(seconds)


@pytest.fixture
def timeline(monkeypatch):
    line = Timeline()
    monkeypatch.setattr(time, "monotonic", lambda: line.now)
    return line


def test_full_cycle(timeline):
    curtain = Curtain()
    curtain.update(0.0)
    assert curtain.alpha == 255.0
    timeline.step(curtain, 1.0)
    assert 0.0 < curtain.alpha < 255.0
    timeline.step(curtain, 1.5)
    assert curtain.alpha == 0.0
    timeline.step(curtain, 3.5)
    assert not curtain.is_done()
    timeline.step(curtain, 0.5)
    assert 0.0 < curtain.alpha < 255.0
    timeline.step(curtain, 1.5)
    assert curtain.is_done()
    assert curtain.alpha == 255.0


def test_fading_in_is_monotonic(timeline):
    curtain = Curtain()
    values = []
    for _ in range(4):
        curtain.update(0.0)
        values.append(curtain.alpha)
        timeline.advance(0.5)
    assert values == sorted(values, reverse=True)


@pytest.mark.parametrize(
    "show_type, seconds, alpha",
    [(ShowType.ONLY_APPEARANCE, 2.5, 0.0), (ShowType.ONLY_DISAPPEARANCE, 2.0, 255.0)],
)
def test_single_phase_curtains_finish(timeline, show_type, seconds, alpha):
    curtain = Curtain(show_type=show_type)
    timeline.step(curtain, seconds)
    assert curtain.is_done()
    assert curtain.alpha == alpha


def test_only_disappearance_starts_transparent(timeline):
    assert Curtain(show_type=ShowType.ONLY_DISAPPEARANCE).alpha == 0.0


def test_waiting_curtain_needs_let_go(timeline):
    calls = []
    curtain = Curtain(should_wait_response=True)
    for seconds in (2.5, 10.0, 10.0):
        timeline.step(curtain, seconds)
    assert curtain.alpha == 0.0
    curtain.let_go(lambda: calls.append("done"))
    timeline.step(curtain, 0.5)
    timeline.step(curtain, 2.0)
    assert curtain.is_done()
    assert calls == ["done"]
    timeline.step(curtain, 1.0)
    assert calls == ["done"]


def test_start_clock_restarts_timing(timeline):
    curtain = Curtain(show_type=ShowType.ONLY_DISAPPEARANCE)
    timeline.advance(5.0)
    curtain.start_clock()
    curtain.update(0.0)
    assert curtain.alpha == 0.0
    assert not curtain.is_done()


@pytest.mark.parametrize("argument", ["appear_duration", "disappear_duration"])
def test_zero_durations_are_rejected(argument):
    with pytest.raises(ValueError):
        Curtain(**{argument: 0})


def test_draw_covers_window_with_black(timeline):
    set_window(SimpleNamespace(size=lambda: (8, 6), mouse_position=lambda: (0.0, 0.0)))
    try:
        curtain = Curtain()
        curtain.resize()
        curtain.update(0.0)
        surface = pygame.Surface((8, 6))
        surface.fill((255, 255, 255))
        curtain.draw(surface)
    finally:
        set_window(None)
    assert surface.get_at((7, 5))[:3] == (0, 0, 0)