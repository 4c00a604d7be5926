"""Load word lists of first names and surnames from text files."""

from __future__ import annotations

from pathlib import Path

from chaincache.dynamic_array import DynamicArray

DEFAULT_NAMES_PATH = "../male_names_rus.txt"
DEFAULT_SURNAMES_PATH = "../male_surnames_rus.txt"

_NAMES_CAPACITY = 737
_SURNAMES_CAPACITY = 14653


def load_words(path: str | Path, count: int) -> DynamicArray:
    """Read the first ``count`` whitespace-separated words of a file."""
    if count < 0:
        raise ValueError("Invalid size")
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as error:
        raise FileNotFoundError(f"can not open {Path(path).name}") from error
    words = content.split()
    if len(words) < count:
        raise ValueError(f"{Path(path).name} holds {len(words)} words, {count} needed")
    return DynamicArray.from_items(words[:count])


def _load_into(path: str | Path, capacity: int) -> DynamicArray:
    words = load_words(path, capacity - 1)
    words.resize(capacity)
    words[capacity - 1] = ""
    return words


def load_names(path: str | Path = DEFAULT_NAMES_PATH) -> DynamicArray:
    """Load the first-name list: 736 words in an array of 737 slots."""
    return _load_into(path, _NAMES_CAPACITY)


def load_surnames(path: str | Path = DEFAULT_SURNAMES_PATH) -> DynamicArray:
    """Load the surname list: 14652 words in an array of 14653 slots."""
    return _load_into(path, _SURNAMES_CAPACITY)