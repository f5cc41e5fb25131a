"""A small debug logger that writes one value per line."""

from __future__ import annotations

import sys
from numbers import Real


def _format_number(value) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def format_vector(vec) -> str:
    """Format a two-component vector as ``{x:y}``."""
    x, y = vec
    return "{" + f"{_format_number(x)}:{_format_number(y)}" + "}"


def _is_vector(obj) -> bool:
    return (
        isinstance(obj, tuple)
        and len(obj) == 2
        and all(isinstance(v, Real) and not isinstance(v, bool) for v in obj)
    )


class Logger:
    """Writes each logged object on its own line of a text stream."""

    def __init__(self, stream=None) -> None:
        self.stream = sys.stderr if stream is None else stream
        self.stream.write("\n")

    def log(self, obj) -> Logger:
        text = format_vector(obj) if _is_vector(obj) else str(obj)
        self.stream.write(text + "\n")
        return self

    __lshift__ = log