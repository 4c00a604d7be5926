import random

from chaincache.dictionary import HashDictionary
from chaincache.hashing import hash_int
from chaincache.random_fill import RAND_MAX, fill_random_dictionary, fill_random_mapping


def test_fill_dictionary_adds_requested_count():
    d = HashDictionary(hash_int)
    fill_random_dictionary(200, d, random.Random(1))
    assert len(d) == 200
    for key, value in d.items():
        assert key == value
        assert 0 <= key <= RAND_MAX


def test_fill_dictionary_keeps_existing_entries():
    d = HashDictionary(hash_int)
    d.add(-1, "kept")
    fill_random_dictionary(30, d, random.Random(2))
    assert len(d) == 31
    assert d[-1] == "kept"


def test_fill_dictionary_with_zero_size_adds_nothing():
    d = HashDictionary(hash_int)
    fill_random_dictionary(0, d, random.Random(3))
    assert len(d) == 0


def test_fill_dictionary_is_reproducible_with_seed():
    first = HashDictionary(hash_int)
    second = HashDictionary(hash_int)
    fill_random_dictionary(25, first, random.Random(9))
    fill_random_dictionary(25, second, random.Random(9))
    assert sorted(first) == sorted(second)


def test_fill_mapping_adds_requested_count():
    mapping = {}
    fill_random_mapping(150, mapping, random.Random(4))
    assert len(mapping) == 150
    assert all(key == value and 0 <= key <= RAND_MAX for key, value in mapping.items())


def test_fill_mapping_keeps_existing_entries():
    mapping = {-7: 0}
    fill_random_mapping(10, mapping, random.Random(5))
    assert len(mapping) == 11
    assert mapping[-7] == 0


def test_fill_mapping_without_rng_still_fills():
    mapping = {}
    fill_random_mapping(20, mapping)
    assert len(mapping) == 20