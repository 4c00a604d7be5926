"""Fill dictionaries with distinct random integers."""

from __future__ import annotations

import random
from collections.abc import MutableMapping

from chaincache.dictionary import HashDictionary

RAND_MAX = 2**31 - 1


def fill_random_dictionary(
    size: int, dictionary: HashDictionary, rng: random.Random | None = None
) -> None:
    """Add ``size`` new random keys, each mapped to itself."""
    rng = rng or random.Random()
    added = 0
    while added < size:
        value = rng.randint(0, RAND_MAX)
        if value in dictionary:
            continue
        dictionary.add(value, value)
        added += 1


def fill_random_mapping(
    size: int, mapping: MutableMapping[int, int], rng: random.Random | None = None
) -> None:
    """Add ``size`` new random keys, each mapped to itself."""
    rng = rng or random.Random()
    added = 0
    while added < size:
        value = rng.randint(0, RAND_MAX)
        if value in mapping:
            continue
        mapping[value] = value
        added += 1