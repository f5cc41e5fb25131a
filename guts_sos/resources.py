"""Game assets: textures, fonts, sounds and music loaded from a resource tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

APP_NAME = "guts:s.o.s"
# Resolution the assets were drawn for.
TARGET_VIDEO_MODE = (1280.0, 720.0)
IS_SMOOTH = True

INTRO_TEXTS = (
    "we were driven into a corner",
    "the secret telegraph wire is all that remains",
    "they will be here soon...",
)


@dataclass(frozen=True)
class TextureInfo:
    """Frame layout of a texture sheet."""

    frame_size: tuple[int, int]
    animation_lengths: tuple[int, ...] = (1,)


TEXTURES: dict[str, tuple[str, TextureInfo]] = {
    "default": ("place_holder.png", TextureInfo((64, 64))),
    "blocknote": ("blocknote/blocknote.png", TextureInfo((300, 350))),
    "blocknote_morse": ("blocknote/blocknote_alphabet.png", TextureInfo((514, 600))),
    "troop": ("faces/troop.png", TextureInfo((512, 512))),
    "commander": ("faces/commander.png", TextureInfo((512, 512))),
    "light": ("bunker/light.png", TextureInfo((1920 * 2, 1080 * 2))),
    "bunker": ("bunker/bunker.png", TextureInfo((1920, 1080))),
}

SOUNDS: dict[str, str] = {
    "morse_noise": "morse.wav",
    "stamp": "stamp.wav",
    "incoming": "explosion/incoming.wav",
}

MUSIC: dict[str, str] = {
    "distance_explosions": "explosion/distance_explosions.wav",
    "carterattack": "explosion/carterattack.wav",
    "distance_battle": "explosion/distance_battle.wav",
    "voice": "faces/voice.wav",
}

FONTS: dict[str, str] = {
    "default": "fonts/dejavu-sans/DejaVuSans.ttf",
    "cybersomething": "fonts/Cybersomething.ttf",
    "too_much_ink": "fonts/TooMuchInk.ttf",
}


class ResourceError(RuntimeError):
    """A required asset could not be loaded."""


def get_scale(window_size) -> tuple[float, float]:
    """Uniform scale that makes target-resolution assets cover the window."""
    width, height = window_size
    scale = max(
        abs(width / TARGET_VIDEO_MODE[0]),
        abs(height / TARGET_VIDEO_MODE[1]),
    )
    return scale, scale


class _SilentSound:
    """Stands in for a sound when no audio device is available."""

    def __init__(self) -> None:
        self._volume = 1.0
        self._playing = False

    def play(self, *args, **kwargs) -> None:
        self._playing = True

    def stop(self) -> None:
        self._playing = False

    def get_num_channels(self) -> int:
        return int(self._playing)

    def set_volume(self, value: float) -> None:
        self._volume = value

    def get_volume(self) -> float:
        return self._volume


def _audio_available() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    return True


class Resources:
    """Every asset the game uses, loaded from one resource directory."""

    def __init__(self, root="res") -> None:
        self.root = Path(root)
        self.textures: dict[str, pygame.Surface] = {}
        self.texture_info: dict[str, TextureInfo] = {}
        self.fonts: dict[str, Path | None] = {}
        self.sounds: dict[str, object] = {}
        self.music: dict[str, object] = {}
        self._loaded = False
        self._font_cache: dict[tuple[str, int], pygame.font.Font] = {}

    def load(self) -> None:
        """Load every asset; raise ResourceError when a required one is missing."""
        self._loaded = False
        self._font_cache.clear()
        self._load_textures()
        self._load_fonts()
        self.sounds = {name: self._load_audio(rel) for name, rel in SOUNDS.items()}
        self.music = {name: self._load_audio(rel) for name, rel in MUSIC.items()}
        self._loaded = True

    def is_loaded(self) -> bool:
        return self._loaded

    def font(self, name: str, size) -> pygame.font.Font:
        """A font of the given asset name at the given pixel size."""
        if not self._loaded:
            raise ResourceError("resources was not loaded")
        size = max(1, int(size))
        key = (name, size)
        font = self._font_cache.get(key)
        if font is None:
            path = self.fonts[name]
            font = pygame.font.Font(None if path is None else str(path), size)
            self._font_cache[key] = font
        return font

    def _load_textures(self) -> None:
        self.textures = {}
        self.texture_info = {}
        for name, (rel, info) in TEXTURES.items():
            try:
                surface = pygame.image.load(str(self.root / rel))
            except (pygame.error, OSError) as exc:
                if name == "default":
                    raise ResourceError("even default texture was not loaded") from exc
                self.textures[name] = self.textures["default"]
                self.texture_info[name] = self.texture_info["default"]
                continue
            self.textures[name] = surface
            self.texture_info[name] = info

    def _load_fonts(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.fonts = {}
        for name, rel in FONTS.items():
            path = self.root / rel
            try:
                pygame.font.Font(str(path), 12)
            except (pygame.error, OSError):
                self.fonts[name] = self.fonts.get("default")
            else:
                self.fonts[name] = path

    def _load_audio(self, rel: str):
        path = self.root / rel
        if not path.is_file():
            raise ResourceError(f"audio file was not loaded: {rel}")
        if not _audio_available():
            return _SilentSound()
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            raise ResourceError(f"audio file was not loaded: {rel}") from exc