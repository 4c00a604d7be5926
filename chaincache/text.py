"""Text helpers: integer rendering, decimal parsing and fixed-width input."""

from __future__ import annotations

from typing import TextIO


def int_to_text(number: int) -> str:
    """Render ``number`` in decimal, with a leading ``-`` when negative."""
    if number == 0:
        return "0"
    digits = str(abs(number))
    return f"-{digits}" if number < 0 else digits


def parse_decimal(text: str) -> float:
    """Parse a non-negative decimal made of digits and ``.`` characters.

    Every ``.`` switches to the fractional part, so digits after any dot
    are fractional digits. An empty string parses as ``0.0``.
    Raises ``ValueError`` on any other character.
    """
    whole_digits: list[str] = []
    fraction_digits: list[str] = []
    in_fraction = False
    for char in text:
        if char == ".":
            in_fraction = True
            continue
        if not "0" <= char <= "9":
            raise ValueError(f"invalid character {char!r}")
        (fraction_digits if in_fraction else whole_digits).append(char)

    whole = 0.0
    for digit in whole_digits:
        whole = whole * 10 + (ord(digit) - ord("0"))

    scale = 1.0
    fraction = 0.0
    for digit in fraction_digits:
        scale *= 0.1
        fraction += (ord(digit) - ord("0")) * scale

    return whole + fraction


def read_padded_line(stream: TextIO, width: int) -> tuple[str, bool]:
    """Read up to ``width`` characters of one line from ``stream``.

    Reading stops at a newline (which is consumed) or at end of input; the
    text is then padded with spaces to ``width``. Returns the text and
    whether the whole line was read.
    """
    chars: list[str] = []
    while len(chars) < width:
        char = stream.read(1)
        if char in ("", "\n"):
            return "".join(chars).ljust(width), True
        chars.append(char)
    return "".join(chars), False


def blank(size: int) -> str:
    """Return a string of ``size`` spaces."""
    if size < 0:
        raise ValueError("Invalid size")
    return " " * size