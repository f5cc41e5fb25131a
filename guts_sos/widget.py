"""Base of on-screen widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import NamedTuple


class OriginState(Enum):
    """Which point of a widget its position refers to."""

    LEFT_UP = 0
    LEFT_DOWN = 1
    RIGHT_UP = 2
    RIGHT_DOWN = 3
    CENTER = 4


class Bounds(NamedTuple):
    """An axis-aligned rectangle in float coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def size(self) -> tuple[float, float]:
        return self.width, self.height

    def contains(self, point) -> bool:
        x, y = point
        return (
            self.left <= x < self.left + self.width
            and self.top <= y < self.top + self.height
        )


class Widget(ABC):
    """A positioned element of the interface."""

    def __init__(self) -> None:
        self.position: tuple[float, float] = (0.0, 0.0)
        self.origin_state = OriginState.CENTER
        self.in_focus = False

    def update(self, delta_time: float) -> None:
        """Advance the widget by one frame; plain widgets do not change."""

    @abstractmethod
    def global_bounds(self) -> Bounds:
        """The area the widget covers, relative to its position."""