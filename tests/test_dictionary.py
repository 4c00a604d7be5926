import pytest
from hypothesis import given
from hypothesis import strategies as st

from chaincache.dictionary import DuplicateKeyError, HashDictionary, format_dictionary
from chaincache.hashing import hash_int, hash_string


def make(**kwargs):
    return HashDictionary(hash_int, **kwargs)


def test_add_then_get_returns_value():
    d = make()
    d.add(7, "seven")
    assert d[7] == "seven"
    assert 7 in d
    assert len(d) == 1


def test_string_keys_work_with_string_hash():
    d = HashDictionary(hash_string)
    d.add("alpha", 1)
    d.add("beta", 2)
    assert d["alpha"] == 1
    assert d["beta"] == 2
    assert "gamma" not in d


def test_duplicate_key_is_rejected():
    d = make()
    d.add(1, "a")
    with pytest.raises(DuplicateKeyError):
        d.add(1, "b")
    assert d[1] == "a"
    assert len(d) == 1


def test_missing_key_lookup_raises():
    d = make()
    d.add(1, "a")
    with pytest.raises(KeyError):
        d[2]
    assert d[1] == "a"
    assert len(d) == 1


def test_lookup_on_empty_dictionary_raises():
    with pytest.raises(KeyError):
        make()[0]


def test_remove_from_empty_dictionary_raises():
    with pytest.raises(KeyError):
        make().remove(3)


def test_remove_missing_key_raises():
    d = make()
    d.add(1, "a")
    with pytest.raises(KeyError):
        d.remove(2)


def test_contains_on_empty_dictionary_is_false():
    assert 5 not in make()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fill_factor": 1.0},
        {"fill_factor": 0.0},
        {"fill_factor": -0.5},
        {"increase_factor": 1.0},
        {"increase_factor": 0.5},
        {"capacity": -1},
    ],
)
def test_invalid_parameters_raise(kwargs):
    with pytest.raises(ValueError):
        make(**kwargs)


def test_missing_hash_function_raises():
    with pytest.raises(ValueError):
        HashDictionary(None)


def test_initial_capacity_is_kept():
    assert make(capacity=5).capacity == 5


def test_capacity_grows_to_respect_fill_factor():
    d = make()
    for key in range(100):
        d.add(key, key)
        assert len(d) <= 0.7 * d.capacity


def test_capacity_shrinks_after_removals():
    d = make()
    for key in range(50):
        d.add(key, key)
    grown = d.capacity
    for key in range(50):
        d.remove(key)
    assert len(d) == 0
    assert d.capacity < grown
    assert list(d) == []


def test_entries_lie_in_their_hash_bucket():
    d = make()
    for key in range(-20, 20, 3):
        d.add(key, str(key))
    for index, key, value in d.entries():
        assert index == hash_int(key) % d.capacity
        assert value == str(key)


def test_items_pairs_keys_with_values():
    d = make()
    d.add(1, "one")
    d.add(2, "two")
    assert dict(d.items()) == {1: "one", 2: "two"}


def test_format_empty_dictionary_is_blank_line():
    assert format_dictionary(make()) == "\n"


def test_format_single_entry():
    d = make()
    d.add(0, "zero")
    assert format_dictionary(d) == "0. < 0, zero>\n\n"


@given(st.lists(st.tuples(st.booleans(), st.integers(-50, 50)), max_size=200))
def test_behaves_like_a_dict(operations):
    d = make()
    model = {}
    for is_add, key in operations:
        if is_add:
            if key in model:
                with pytest.raises(DuplicateKeyError):
                    d.add(key, key * 2)
            else:
                d.add(key, key * 2)
                model[key] = key * 2
        else:
            if key in model:
                d.remove(key)
                del model[key]
            else:
                with pytest.raises(KeyError):
                    d.remove(key)
    assert len(d) == len(model)
    assert dict(d.items()) == model
    for key, value in model.items():
        assert d[key] == value