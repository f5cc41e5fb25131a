"""The bunker backdrop with a slowly swaying ceiling lamp."""

from __future__ import annotations

import math

import pygame

from .resources import get_scale
from .window import Clock, window_size

SWAYING_ANGLE = 1.5
SWAYING_TIME = 10.0
OFFSET_TIME_STEP = 0.01


def _scaled(surface: pygame.Surface, scale: float) -> pygame.Surface:
    width, height = surface.get_size()
    size = (max(1, round(width * scale)), max(1, round(height * scale)))
    return pygame.transform.smoothscale(surface, size)


class BasementBackground:
    """Draws the bunker centred in the window and a lamp swinging from above."""

    def __init__(self, resources) -> None:
        self._bunker = resources.textures["bunker"]
        self._light = resources.textures["light"]
        self.offset_angle = 0.0
        self.offset_time = 0.0
        self.clock = Clock()
        self._angle = 0.0
        self._bunker_image = self._bunker
        self._light_image = self._light
        self._bunker_center = (0.0, 0.0)
        self._light_pivot = (0.0, 0.0)

    @property
    def light_angle(self) -> float:
        """Current clockwise rotation of the lamp, in degrees."""
        return self._angle

    def resize(self) -> None:
        width, height = window_size()
        scale, _ = get_scale((width, height))
        self._bunker_image = _scaled(self._bunker, scale)
        self._light_image = _scaled(self._light, scale)
        self._bunker_center = (width / 2.0, height / 2.0)
        self._light_pivot = (width / 2.0, -height * 1.25)

    def update(self, delta_time: float) -> None:
        self.offset_time = min(max(self.offset_time - OFFSET_TIME_STEP, 0.0), self.offset_time)
        period = SWAYING_TIME - self.offset_time
        phase = self.clock.elapsed() / period * 2.0 * math.pi
        self._angle = (SWAYING_ANGLE + self.offset_angle) * math.sin(phase)

    def draw(self, surface) -> None:
        bunker = self._bunker_image
        cx, cy = self._bunker_center
        surface.blit(bunker, bunker.get_rect(center=(round(cx), round(cy))))

        light = pygame.transform.rotate(self._light_image, -self._angle)
        half = self._light_image.get_height() / 2.0
        theta = math.radians(self._angle)
        px, py = self._light_pivot
        center = (px - half * math.sin(theta), py + half * math.cos(theta))
        surface.blit(light, light.get_rect(center=(round(center[0]), round(center[1]))))