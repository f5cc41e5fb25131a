"""A telegraph key: hold space for dots and dashes, pauses end letters and words."""

from __future__ import annotations

import pygame

from .buttons import BaseButton
from .label import Label
from .morse import BACKSPACE, DASH_SYMBOL, DOT_SYMBOL, decode_letter
from .widget import Bounds, OriginState
from .window import Clock, window_size

DASH_TIME = 0.25
LETTER_TIME = 1.70
WORD_TIME = 4.0
_WHITE = (255, 255, 255)


class _AlwaysFocusButton(BaseButton):
    """The telegraph key: always in focus, held while the key is down."""

    def __init__(self, parent: Telegraph) -> None:
        super().__init__()
        self._parent = parent
        self.in_focus = True
        self.key_button = pygame.K_SPACE
        self.held = False
        self.press_clock = Clock()

    def global_bounds(self) -> Bounds:
        return Bounds(0.0, 0.0, 0.0, 0.0)

    def press_conditions(self) -> bool:
        return self.in_focus and self.held

    def _on_click(self, delta_time: float) -> None:
        self.press_clock.restart()
        self._parent.noise.play(loops=-1)

    def _on_release(self, delta_time: float) -> None:
        self._parent._register(self.press_clock.elapsed() >= DASH_TIME)


class Telegraph:
    """Turns key presses into Morse letters shown on screen."""

    def __init__(self, resources) -> None:
        self.input_label = Label("", resources.fonts["default"], _WHITE, 80, OriginState.CENTER)
        self.output_label = Label("", resources.fonts["cybersomething"], _WHITE, 80, OriginState.CENTER)
        self.noise = resources.sounds["morse_noise"]
        self.last_press_clock = Clock()
        self._letter_bits: list[bool] = []
        self._letter_said = False
        self._word_said = True
        self._button = _AlwaysFocusButton(self)

    def key_down(self) -> None:
        """The telegraph key went down."""
        self._button.held = True

    def key_up(self) -> None:
        """The telegraph key came up."""
        self._button.held = False

    def update(self, delta_time: float) -> None:
        self._button.update(delta_time)
        if self._word_said:
            return
        elapsed = self.last_press_clock.elapsed()
        if not self._letter_said and elapsed > LETTER_TIME:
            letter = decode_letter(self._letter_bits)
            if letter is not None:
                if letter != BACKSPACE:
                    self.output_label.append(letter)
                elif not self.output_label.empty():
                    self.output_label.erase(len(self.output_label.text) - 1)
            self._letter_bits.clear()
            self.input_label.clear()
            self._letter_said = True
        elif elapsed > WORD_TIME:
            if not self.output_label.empty():
                self.output_label.append(" ")
            self._word_said = True

    def resize(self) -> None:
        width, height = window_size()
        self.input_label.char_size = int(height / 10)
        self.output_label.char_size = int(height / 10)
        self.input_label.position = (width / 2.0, height / 2.0)
        self.output_label.position = (
            width / 2.0,
            height / 2.0 + self.input_label.char_size * 1.5,
        )

    def draw(self, surface) -> None:
        self.input_label.draw(surface)
        self.output_label.draw(surface)

    def _register(self, dash: bool) -> None:
        self._letter_bits.append(dash)
        self.input_label.append(DASH_SYMBOL if dash else DOT_SYMBOL)
        self.noise.stop()
        self.last_press_clock.restart()
        self._letter_said = False
        self._word_said = False