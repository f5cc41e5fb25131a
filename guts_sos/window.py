"""The game window and the process-wide handle scenes use to reach it."""

from __future__ import annotations

import time

import pygame

from .resources import APP_NAME, ResourceError

DEFAULT_SIZE = (1280, 720)
FRAMERATE_LIMIT = 60


class WindowLostError(RuntimeError):
    """No window has been registered."""


class Clock:
    """Measures seconds since it was started or last restarted."""

    def __init__(self) -> None:
        self._start = time.monotonic()

    def restart(self) -> float:
        """Reset to zero and return the seconds that had passed."""
        now = time.monotonic()
        elapsed = now - self._start
        self._start = now
        return elapsed

    def elapsed(self) -> float:
        return time.monotonic() - self._start


class Window:
    """A resizable game window drawing through a movable view."""

    def __init__(self, resources) -> None:
        if not resources.is_loaded():
            raise ResourceError("resources was not loaded")
        pygame.display.init()
        pygame.display.set_caption(APP_NAME)
        pygame.display.set_icon(resources.textures["default"])
        self.is_fullscreen = False
        self.view_offset = (0.0, 0.0)
        self._frame_clock = pygame.time.Clock()
        self._open = True
        self._set_mode(DEFAULT_SIZE, pygame.RESIZABLE)
        set_window(self)

    @property
    def is_open(self) -> bool:
        return self._open

    def size(self) -> tuple[int, int]:
        return self._screen.get_size()

    def resize(self, size) -> None:
        """Resize the window and its drawing surface; the view is reset."""
        flags = pygame.FULLSCREEN if self.is_fullscreen else pygame.RESIZABLE
        self._set_mode(tuple(int(v) for v in size), flags)

    def change_fullscreen(self) -> None:
        if self.is_fullscreen:
            self._set_mode(DEFAULT_SIZE, pygame.RESIZABLE)
        else:
            self._set_mode(self._fullscreen_size(), pygame.FULLSCREEN)
        self.is_fullscreen = not self.is_fullscreen

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in world coordinates of the current view."""
        x, y = pygame.mouse.get_pos()
        return x + self.view_offset[0], y + self.view_offset[1]

    def clear(self) -> None:
        self.surface.fill((0, 0, 0))

    def display(self) -> None:
        """Show the drawn frame and hold the frame rate."""
        self._screen.fill((0, 0, 0))
        ox, oy = self.view_offset
        self._screen.blit(self.surface, (-ox, -oy))
        pygame.display.flip()
        self._frame_clock.tick(FRAMERATE_LIMIT)

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()

    def _set_mode(self, size, flags) -> None:
        self._screen = pygame.display.set_mode(size, flags)
        self.surface = pygame.Surface(self._screen.get_size())
        self.view_offset = (0.0, 0.0)

    def _fullscreen_size(self) -> tuple[int, int]:
        modes = pygame.display.list_modes()
        if isinstance(modes, list) and modes:
            size = modes[0]
        else:
            desktops = pygame.display.get_desktop_sizes()
            size = desktops[0] if desktops else self.size()
        if not all(size):
            size = self.size()
        return tuple(size)


class _WindowSlot:
    """Holds the window that scenes and widgets draw into."""

    def __init__(self) -> None:
        self.window = None


_slot = _WindowSlot()


def set_window(window) -> None:
    """Register the window that scenes and widgets draw into."""
    _slot.window = window


def check_window() -> None:
    if _slot.window is None:
        raise WindowLostError("window wrapper lost window")


def get_window():
    check_window()
    return _slot.window


def window_size() -> tuple[int, int]:
    return get_window().size()