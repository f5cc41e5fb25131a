"""A black screen that fades in, holds and fades out."""

from __future__ import annotations

from enum import Enum, auto

import pygame

from .window import Clock, window_size


class ShowType(Enum):
    """Which phases of the curtain run."""

    ALL = auto()
    ONLY_APPEARANCE = auto()
    ONLY_DISAPPEARANCE = auto()


class _State(Enum):
    APPEARING = auto()
    SHOWING = auto()
    DISAPPEARING = auto()
    DONE = auto()


class Curtain:
    """Fades the screen from black, waits, and fades back to black."""

    def __init__(
        self,
        should_wait_response=False,
        show_type=ShowType.ALL,
        appear_duration=2.0,
        showing_duration=3.0,
        disappear_duration=1.5,
    ) -> None:
        if appear_duration == 0:
            raise ValueError("appear_duration should be not equal zero")
        if disappear_duration == 0:
            raise ValueError("disappear_duration should be not equal zero")
        self.should_wait_response = should_wait_response
        self.show_type = show_type
        self.appear_duration = float(appear_duration)
        self.showing_duration = float(showing_duration)
        self.disappear_duration = float(disappear_duration)
        self._state = (
            _State.DISAPPEARING
            if show_type is ShowType.ONLY_DISAPPEARANCE
            else _State.APPEARING
        )
        self._alpha = 0.0
        self._is_waiting = True
        self._on_exit = None
        self._size = (0, 0)
        self.clock = Clock()

    @property
    def alpha(self) -> float:
        """Current opacity, 0 to 255."""
        return self._alpha

    def update(self, delta_time: float) -> None:
        if self._state is _State.DONE:
            return
        elapsed = self.clock.elapsed()
        if self._state is _State.APPEARING:
            self._alpha = _clamp(255.0 - elapsed / self.appear_duration * 255.0)
            if elapsed > self.appear_duration and self._alpha < 1.0:
                self.clock.restart()
                if self.show_type is ShowType.ONLY_APPEARANCE:
                    self._state = _State.DONE
                else:
                    self._state = _State.SHOWING
        elif self._state is _State.SHOWING:
            finished = (
                not self._is_waiting
                if self.should_wait_response
                else elapsed > self.showing_duration
            )
            if finished:
                self.clock.restart()
                self._state = _State.DISAPPEARING
        elif self._state is _State.DISAPPEARING:
            self._alpha = _clamp(elapsed / self.disappear_duration * 255.0)
            if elapsed > self.disappear_duration and self._alpha > 254.0:
                self._state = _State.DONE
                if self._on_exit is not None:
                    self._on_exit()

    def resize(self) -> None:
        width, height = window_size()
        self._size = (int(width), int(height))

    def draw(self, surface) -> None:
        width, height = self._size
        if width <= 0 or height <= 0:
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, int(self._alpha)))
        surface.blit(overlay, (0, 0))

    def let_go(self, on_end) -> None:
        """Stop waiting and call on_end once the curtain has closed."""
        self._on_exit = on_end
        self._is_waiting = False

    def start_clock(self) -> None:
        self.clock.restart()

    def is_done(self) -> bool:
        return self._state is _State.DONE


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 255.0)