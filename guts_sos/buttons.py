"""Buttons that react to the mouse and keyboard."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from .label import Label
from .widget import Bounds, Widget
from .window import get_window

TOUCH_COLOR = pygame.Color(255, 0, 0)

Callback = Optional[Callable[[], None]]


class BaseButton(Widget):
    """A widget that tracks hovering, clicking, holding and releasing."""

    def __init__(self) -> None:
        super().__init__()
        self.is_clicked = False
        self.mouse_button = 1
        self.key_button = pygame.K_RETURN

    def update(self, delta_time: float) -> None:
        mx, my = get_window().mouse_position()
        px, py = self.position
        if self.global_bounds().contains((mx - px, my - py)) or self.in_focus:
            self._on_touch(delta_time)
            if self.press_conditions():
                if not self.is_clicked:
                    self._on_click(delta_time)
                self.is_clicked = True
                self._on_press(delta_time)
            elif self.is_clicked:
                self.is_clicked = False
                self._on_release(delta_time)
        else:
            self._on_afk(delta_time)
            self.is_clicked = False

    def press_conditions(self) -> bool:
        """Whether the button is held down right now."""
        if not pygame.display.get_init():
            return False
        if pygame.mouse.get_pressed()[self.mouse_button - 1]:
            return True
        return self.in_focus and bool(pygame.key.get_pressed()[self.key_button])

    def _on_press(self, delta_time: float) -> None:
        pass

    def _on_click(self, delta_time: float) -> None:
        pass

    def _on_release(self, delta_time: float) -> None:
        pass

    def _on_touch(self, delta_time: float) -> None:
        pass

    def _on_afk(self, delta_time: float) -> None:
        pass


class LabelButton(BaseButton):
    """A text button that turns red under the pointer and runs callbacks."""

    def __init__(self, label: Label, on_press: Callback = None, on_release: Callback = None) -> None:
        self.label = label
        super().__init__()
        self.on_press: Callback = on_press
        self.on_release: Callback = on_release
        self.on_click: Callback = None
        self.color_afk = label.fill_color
        self.color_touch = pygame.Color(TOUCH_COLOR)

    @property
    def position(self) -> tuple[float, float]:
        return self.label.position

    @position.setter
    def position(self, value) -> None:
        self.label.position = value

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

    def draw(self, surface) -> None:
        self.label.draw(surface)

    def global_bounds(self) -> Bounds:
        return self.label.global_bounds()

    def _on_click(self, delta_time: float) -> None:
        if self.on_click is not None:
            self.on_click()

    def _on_press(self, delta_time: float) -> None:
        if self.on_press is not None:
            self.on_press()

    def _on_release(self, delta_time: float) -> None:
        if self.on_release is not None:
            self.on_release()

    def _on_touch(self, delta_time: float) -> None:
        self.label.fill_color = self.color_touch

    def _on_afk(self, delta_time: float) -> None:
        self.label.fill_color = self.color_afk