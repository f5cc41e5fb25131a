"""A text widget whose origin follows its text."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .widget import Bounds, OriginState, Widget


@lru_cache(maxsize=64)
def _font(path: str | None, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


class Label(Widget):
    """A line of text drawn around an origin chosen by its origin state."""

    def __init__(
        self,
        text="",
        font=None,
        color=(0, 0, 0),
        char_size=30,
        origin_state=OriginState.CENTER,
    ) -> None:
        self._text = str(text)
        self._font_path = None if font is None else str(font)
        self._color = pygame.Color(color)
        self._char_size = int(char_size)
        self._origin = (0.0, 0.0)
        self._size = (0, 0)
        super().__init__()
        self.origin_state = origin_state

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value) -> None:
        self._text = str(value)
        self.update_origin()

    @property
    def origin_state(self) -> OriginState:
        return self._origin_state

    @origin_state.setter
    def origin_state(self, state: OriginState) -> None:
        size = self._measure()
        self._origin = self._origin_for(state, size)
        self._size = size
        self._origin_state = state

    @property
    def char_size(self) -> int:
        return self._char_size

    @char_size.setter
    def char_size(self, value) -> None:
        self._char_size = int(value)
        self.update_origin()

    @property
    def fill_color(self) -> pygame.Color:
        return pygame.Color(self._color)

    @fill_color.setter
    def fill_color(self, value) -> None:
        self._color = pygame.Color(value)

    def empty(self) -> bool:
        return not self._text

    def clear(self) -> None:
        self.text = ""

    def append(self, text) -> None:
        self.text = self._text + str(text)

    def erase(self, position: int, count: int = 1) -> None:
        self.text = self._text[:position] + self._text[position + count:]

    def update_origin(self) -> None:
        """Recompute the origin from the current text and origin state."""
        self.origin_state = self._origin_state

    def global_bounds(self) -> Bounds:
        width, height = self._size
        ox, oy = self._origin
        return Bounds(-ox, -oy, width, height)

    def draw(self, surface) -> None:
        if not self._text:
            return
        image = self._get_font().render(self._text, True, self._color)
        x, y = self.position
        ox, oy = self._origin
        surface.blit(image, (x - ox, y - oy))

    def _get_font(self) -> pygame.font.Font:
        return _font(self._font_path, max(1, self._char_size))

    def _measure(self) -> tuple[int, int]:
        if not self._text:
            return 0, 0
        return self._get_font().size(self._text)

    @staticmethod
    def _origin_for(state: OriginState, size) -> tuple[float, float]:
        width, height = size
        if state is OriginState.CENTER:
            return width / 2.0, height / 2.0
        if state is OriginState.LEFT_UP:
            return 0.0, 0.0
        if state is OriginState.LEFT_DOWN:
            return 0.0, float(height)
        raise ValueError("bad origin state")