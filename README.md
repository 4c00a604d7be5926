# chaincache

This package provides small, self-contained data structures and an LRU cache built on top of them.

- `chaincache.dynamic_array`: `DynamicArray` is an array with a fixed capacity that you resize explicitly. `format_array` renders it.
- `chaincache.linked_list`: `LinkedList` is a doubly linked list. Its `Node` objects stay valid as handles. `format_list` renders it.
- `chaincache.dictionary`: `HashDictionary` is a separate-chaining hash table. You supply the hash function. It grows and shrinks with its load. The module also has `DuplicateKeyError` and `format_dictionary`.
- `chaincache.lru_cache`: `LRUCache` sits in front of a fetch function.
- `chaincache.hashing`: the hash functions `hash_int` and `hash_string`.
- `chaincache.random_fill`: `fill_random_dictionary` and `fill_random_mapping` add distinct random integers.
- `chaincache.text`: `int_to_text`, `parse_decimal`, `read_padded_line` and `blank`.
- `chaincache.person`: the `Person` record, with fixed-width name fields.
- `chaincache.comparators`: `cmp_int`, `cmp_int_check`, `cmp_person` and `cmp_person_check`.
- `chaincache.names`: `load_words`, `load_names` and `load_surnames`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Hash dictionary

```python
from chaincache.dictionary import HashDictionary, DuplicateKeyError, format_dictionary
from chaincache.hashing import hash_int

d = HashDictionary(hash_int)          # fill_factor=0.7, increase_factor=2.0, capacity=0
d.add(5, "five")
d.add(12, "twelve")
assert 5 in d
assert d[12] == "twelve"
d.remove(5)
print(len(d), d.capacity)             # capacity is a property: the number of buckets
print(format_dictionary(d), end="")   # "index. < key, value>" per entry, then a blank line

try:
    d.add(12, "again")
except DuplicateKeyError:             # a subclass of KeyError
    pass
```

The buckets are rebuilt when the table changes size:

- When the number of entries exceeds `fill_factor * capacity`, the bucket array is multiplied by `increase_factor`.
- When the number of entries falls below `fill_factor * capacity / increase_factor`, the bucket array is divided by `increase_factor`.

Invalid parameters raise `ValueError`. These are an `increase_factor` of 1 or less, a `fill_factor` outside the open interval (0, 1), or a negative capacity.

Reading or removing a missing key raises `KeyError`.

Iteration yields keys in bucket order. `items()` yields `(key, value)` pairs. `entries()` yields `(bucket_index, key, value)` triples.

## LRU cache

The fetch function returns the value for a key. If it has no value, it raises `LookupError`. That error reaches the caller, and the cache is left unchanged.

```python
from chaincache.lru_cache import LRUCache
from chaincache.hashing import hash_int

def fetch(key):
    if key < 0:
        raise LookupError(key)
    return key * key

cache = LRUCache(fetch, 2, hash_int)
cache.get(3)       # 9, fetched
cache.get(4)       # 16, fetched
cache.get(3)       # 9, from the cache; 3 moves to the back
cache.get(5)       # 25, fetched; the cache was full, so 4 (at the front) was evicted
print(cache.keys())   # [5, 3]
print(len(cache))     # 2
```

A hit moves the key to the back of the history. A newly fetched key is placed at the front. When the cache is full, the key at the front is evicted.

`keys()` lists the keys from the next one to be evicted to the last. A capacity of zero or less raises `ValueError`.

## Linked list and dynamic array

```python
from chaincache.linked_list import LinkedList, format_list
from chaincache.dynamic_array import DynamicArray, format_array

items = LinkedList([1, 2, 3])
node = items.append(4)        # append, prepend and insert_at return the new Node
items.prepend(0)
items.remove(2)               # removes by index and returns the value
items.erase(node)             # removes by node and returns the node that followed
print(format_list(items))     # "0 1 3 "

array = DynamicArray(3)       # three slots, all None
array[0] = "a"
array.resize(5)
array.delete(1)
print(len(array), format_array(DynamicArray.from_items([1, 2])))
```

Both structures reject negative indices with `IndexError`, instead of counting from the end.

## Text, people and names

- `int_to_text(-42)` returns `"-42"`.
- `parse_decimal("3.25")` returns `3.25`. It accepts only digits and `.`, and any other character raises `ValueError`.
- `read_padded_line(stream, width)` reads at most `width` characters of one line and pads them with spaces. It returns the text and whether the whole line was read.
- `Person(id, first_name, middle_name, last_name, born_year)` holds one person's record:
  - A field left out is 40 spaces, and `born_year` defaults to 2005.
  - An id, first name or middle name longer than 40 characters raises `ValueError`.
  - Two people are equal when their id and three name fields match. The birth year is not compared.
  - `Person.read(stream, out)` prompts on `out` and reads the fields from `stream`. These default to standard input and output.
- `cmp_person` orders people by the first character of their first name, and an empty first name comes first.
- `load_words(path, count)` returns the first `count` whitespace-separated words of a UTF-8 file as a `DynamicArray`.
- `load_names()` and `load_surnames()` read `../male_names_rus.txt` and `../male_surnames_rus.txt` by default:
  - They need 736 and 14652 words respectively.
  - Each returns an array with one extra empty slot at the end.
  - A file that is missing or too short raises an error.

## What this package does not do

This is a library only. It has no command-line program, no graphical interface and no plotting. It does not ship the name list files that `load_names` and `load_surnames` read; you must provide them.