"""A speaking character: a portrait and phrases typed out with a voice."""

from __future__ import annotations

import pygame

from .label import Label
from .resources import get_scale
from .stamp_label import StampLabelMusic
from .widget import OriginState
from .window import window_size

_WHITE = (255, 255, 255)
LETTER_TIME = 0.08


class Character:
    """Shows a portrait in a lower corner and says its phrases one after another."""

    def __init__(
        self,
        resources,
        texture,
        origin_state=OriginState.LEFT_DOWN,
        phrases=("default phrase",),
        pause_after_talk=2.0,
    ) -> None:
        if origin_state not in (OriginState.LEFT_DOWN, OriginState.RIGHT_DOWN):
            raise ValueError("bad origin state for character")
        phrases = list(phrases)
        if not phrases:
            raise ValueError("a character needs at least one phrase")
        self.texture = texture
        self.origin_state = origin_state
        self.phrases = phrases
        self.pause_after_talk = float(pause_after_talk)
        self.label = StampLabelMusic(
            Label("", resources.fonts["too_much_ink"], _WHITE),
            phrases[0],
            resources.music["voice"],
            LETTER_TIME,
        )
        self._index = 0
        self._is_end = False
        self._image = texture
        self._image_pos = (0, 0)

    def set_phrases(self, phrases) -> None:
        self.phrases = list(phrases)
        self._index = 0

    def resize(self) -> None:
        width, height = window_size()
        scale, _ = get_scale((width, height))
        self.label.char_size = int(height / 20)
        self.label.position = (width / 2.0, height / 2.0)
        tw, th = self.texture.get_size()
        sw, sh = max(1, round(tw * scale)), max(1, round(th * scale))
        self._image = pygame.transform.smoothscale(self.texture, (sw, sh))
        if self.origin_state is OriginState.LEFT_DOWN:
            self._image_pos = (0, round(height - sh))
        else:
            self._image_pos = (round(width - sw), round(height - sh))

    def is_end_of_speech(self) -> bool:
        return self._is_end

    def update(self, delta_time: float) -> None:
        if self._is_end:
            return
        self.label.update(delta_time)
        if self.label.is_done() and self.label.last_stamp() >= self.pause_after_talk:
            self._index += 1
            self._is_end = self._index >= len(self.phrases)
            if self._is_end:
                return
            self.label.reset_text(self.phrases[self._index])

    def draw(self, surface) -> None:
        surface.blit(self._image, self._image_pos)
        self.label.draw(surface)