"""Hash functions for the keys used with :class:`HashDictionary`."""

from __future__ import annotations

_STRING_MODULUS = 1_000_000_007


def hash_int(value: int) -> int:
    """Hash an integer to its absolute value."""
    return abs(value)


def hash_string(text: str) -> int:
    """Sum the character codes of ``text`` modulo 1_000_000_007."""
    total = 0
    for char in text:
        total = (total + ord(char)) % _STRING_MODULUS
    return total