"""Morse alphabet used by the telegraph: a dash is ``True``, a dot is ``False``."""

from __future__ import annotations

from collections.abc import Iterable

BACKSPACE = "\b"
DOT_SYMBOL = "•"
DASH_SYMBOL = "—"

MORSE_CODES: dict[tuple[bool, ...], str] = {
    (False, True): "A",
    (True, False, False, False): "B",
    (True, False, True, False): "C",
    (True, False, False): "D",
    (False,): "E",
    (False, False, True, False): "F",
    (True, True, False): "G",
    (False, False, False, False): "H",
    (False, False): "I",
    (False, True, True, True): "J",
    (True, False, True): "K",
    (False, True, False, False): "L",
    (True, True): "M",
    (True, False): "N",
    (True, True, True): "O",
    (False, True, True, False): "P",
    (True, True, False, True): "Q",
    (False, True, False): "R",
    (False, False, False): "S",
    (True,): "T",
    (False, False, True): "U",
    (False, False, False, True): "V",
    (False, True, True): "W",
    (True, False, False, True): "X",
    (True, False, True, True): "Y",
    (True, True, False, False): "Z",
    (True, True, True, True, True): "0",
    (False, True, True, True, True): "1",
    (False, False, True, True, True): "2",
    (False, False, False, True, True): "3",
    (False, False, False, False, True): "4",
    (False, False, False, False, False): "5",
    (True, False, False, False, False): "6",
    (True, True, False, False, False): "7",
    (True, True, True, False, False): "8",
    (True, True, True, True, False): "9",
    (False,) * 8: BACKSPACE,
}


def decode_letter(bits: Iterable[object]) -> str | None:
    """Return the character for a sequence of dots and dashes, or None if unknown."""
    return MORSE_CODES.get(tuple(bool(bit) for bit in bits))


def bits_to_symbols(bits: Iterable[object]) -> str:
    """Render dots and dashes as the symbols shown while keying."""
    return "".join(DASH_SYMBOL if bit else DOT_SYMBOL for bit in bits)