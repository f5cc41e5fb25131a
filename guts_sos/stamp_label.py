"""Labels that type their text out one character at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .label import Label
from .window import Clock

DEFAULT_LETTER_TIME = 0.2


class BaseStampLabel(Label, ABC):
    """A label that reveals a target text letter by letter."""

    def __init__(self, label: Label, text, letter_time=DEFAULT_LETTER_TIME) -> None:
        super().__init__(
            label.text,
            label._font_path,
            label.fill_color,
            label.char_size,
            label.origin_state,
        )
        self.position = label.position
        text = str(text)
        if not text:
            raise ValueError("string should be not empty")
        self._stamp_text = text
        self._stamp_index = 0
        self._done = False
        self.letter_time = float(letter_time)
        self.clock = Clock()

    def reset_text(self, text) -> None:
        """Start typing a new text from an empty label."""
        text = str(text)
        if not text:
            raise ValueError("string should be not empty")
        self.clear()
        self._reset_sound()
        self._done = False
        self._stamp_text = text
        self._stamp_index = 0

    def is_done(self) -> bool:
        return self._done

    def last_stamp(self) -> float:
        """Seconds since the last letter was typed."""
        return self.clock.elapsed()

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Type the next letter when its time has come."""

    @abstractmethod
    def _reset_sound(self) -> None:
        """Bring the sound back to its starting state."""

    def _stamp_next(self) -> None:
        self.append(self._stamp_text[self._stamp_index])
        self._stamp_index += 1
        self.clock.restart()
        self._done = self._stamp_index == len(self._stamp_text)


class StampLabelSound(BaseStampLabel):
    """Plays a short sound for every letter it types."""

    def __init__(self, label: Label, text, sound, letter_time=DEFAULT_LETTER_TIME) -> None:
        super().__init__(label, text, letter_time)
        self.sound = sound

    def _reset_sound(self) -> None:
        self.sound.stop()

    def update(self, delta_time: float) -> None:
        if self.is_done() or self.clock.elapsed() < self.letter_time:
            return
        self.sound.play()
        self._stamp_next()


class StampLabelMusic(BaseStampLabel):
    """Plays a voice track while typing and stops it when the text is complete."""

    def __init__(self, label: Label, text, voice, letter_time=DEFAULT_LETTER_TIME) -> None:
        super().__init__(label, text, letter_time)
        self.voice = voice
        self._on_start = True
        self._first_on_end = True

    def _reset_sound(self) -> None:
        self._on_start = True
        self._first_on_end = True

    def update(self, delta_time: float) -> None:
        if not self.is_done():
            if self._on_start:
                self._on_start = False
                self.voice.play()
            elif self.clock.elapsed() < self.letter_time:
                return
            self._stamp_next()
        elif self._first_on_end:
            self._first_on_end = False
            self.voice.stop()

    def close(self) -> None:
        """Silence the voice track."""
        self.voice.stop()

    def __enter__(self) -> StampLabelMusic:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()