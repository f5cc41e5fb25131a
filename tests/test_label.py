import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from guts_sos.label import Label
from guts_sos.widget import OriginState


def test_text_editing_round_trip():
    label = Label("AB")
    label.append("CD")
    assert label.text == "ABCD"
    label.erase(1)
    assert label.text == "ACD"
    label.erase(0, 2)
    assert label.text == "D"


def test_clear_and_empty():
    label = Label("text")
    assert label.empty() is False
    label.clear()
    assert label.empty() is True
    assert label.text == ""


def test_empty_label_has_no_extent():
    bounds = Label("").global_bounds()
    assert (bounds.width, bounds.height) == (0, 0)


def test_center_origin_centres_bounds():
    bounds = Label("Hello", char_size=40).global_bounds()
    assert bounds.width > 0
    assert bounds.left == pytest.approx(-bounds.width / 2)
    assert bounds.top == pytest.approx(-bounds.height / 2)


def test_left_up_origin_starts_at_position():
    bounds = Label("Hello", origin_state=OriginState.LEFT_UP).global_bounds()
    assert (bounds.left, bounds.top) == (0.0, 0.0)


def test_left_down_origin_sits_on_position():
    bounds = Label("Hello", origin_state=OriginState.LEFT_DOWN).global_bounds()
    assert bounds.left == 0.0
    assert bounds.top == -bounds.height


@pytest.mark.parametrize("state", [OriginState.RIGHT_UP, OriginState.RIGHT_DOWN])
def test_unsupported_origin_state_is_rejected(state):
    label = Label("Hello")
    with pytest.raises(ValueError):
        label.origin_state = state
    assert label.origin_state is OriginState.CENTER


def test_unsupported_origin_state_in_constructor():
    with pytest.raises(ValueError):
        Label("x", origin_state=OriginState.RIGHT_DOWN)


def test_bigger_char_size_gives_taller_text():
    label = Label("Hello", char_size=20)
    small = label.global_bounds().height
    label.char_size = 60.7
    assert label.char_size == 60
    assert label.global_bounds().height > small


def test_text_change_moves_centre_origin():
    label = Label("a")
    narrow = label.global_bounds()
    label.text = "a much longer line"
    wide = label.global_bounds()
    assert wide.width > narrow.width
    assert wide.left == pytest.approx(-wide.width / 2)


def test_fill_color_round_trip():
    label = Label("x", color=(0, 0, 0))
    label.fill_color = (255, 0, 0)
    assert label.fill_color == pygame.Color(255, 0, 0)


def test_draw_paints_text_on_surface():
    surface = pygame.Surface((200, 100))
    label = Label("Hi", color=(255, 255, 255), char_size=40)
    label.position = (100, 50)
    label.draw(surface)
    painted = [
        (x, y)
        for x in range(200)
        for y in range(100)
        if tuple(surface.get_at((x, y)))[:3] != (0, 0, 0)
    ]
    assert painted
    bounds = label.global_bounds()
    for x, y in painted:
        assert bounds.left + 100 - 1 <= x <= bounds.left + 100 + bounds.width + 1
        assert bounds.top + 50 - 1 <= y <= bounds.top + 50 + bounds.height + 1


def test_draw_of_empty_label_leaves_surface():
    surface = pygame.Surface((20, 20))
    Label("", color=(255, 255, 255)).draw(surface)
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)