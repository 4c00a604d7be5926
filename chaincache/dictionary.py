"""A separately chained hash table that grows and shrinks with its load."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any

from chaincache.dynamic_array import DynamicArray
from chaincache.linked_list import LinkedList, Node

_INT_MAX = 2**31 - 1


class DuplicateKeyError(KeyError):
    """Raised when a key is added that the dictionary already holds."""


class HashDictionary:
    """A mapping from keys to values, chained in buckets by a user hash.

    The bucket array doubles (by ``increase_factor``) once the number of
    entries exceeds ``fill_factor`` times the capacity, and shrinks by the
    same factor once it falls below ``fill_factor / increase_factor``.
    """

    def __init__(
        self,
        hash_function: Callable[[Any], int],
        fill_factor: float = 0.7,
        increase_factor: float = 2.0,
        capacity: int = 0,
    ) -> None:
        if (
            increase_factor <= 1
            or fill_factor >= 1
            or fill_factor <= 0
            or capacity < 0
            or hash_function is None
        ):
            raise ValueError("invalid parameters")
        self._hash = hash_function
        self._fill_factor = fill_factor
        self._increase_factor = increase_factor
        self._buckets = self._make_buckets(capacity)
        self._size = 0

    @staticmethod
    def _make_buckets(count: int) -> DynamicArray:
        return DynamicArray.from_items(LinkedList() for _ in range(count))

    def _bucket_for(self, key: Hashable) -> LinkedList:
        return self._buckets[self._hash(key) % len(self._buckets)]

    def _find(self, key: Hashable) -> Node | None:
        if len(self._buckets) == 0:
            return None
        return next(
            (node for node in self._bucket_for(key).nodes() if node.value[0] == key),
            None,
        )

    def _rebuild(self, new_capacity: int) -> None:
        buckets = self._make_buckets(new_capacity)
        for key, value in self.items():
            buckets[self._hash(key) % new_capacity].append((key, value))
        self._buckets.swap(buckets)

    @property
    def capacity(self) -> int:
        """The number of buckets."""
        return len(self._buckets)

    def add(self, key: Hashable, value: Any) -> None:
        """Insert a new entry; raise :class:`DuplicateKeyError` if ``key`` exists."""
        if self.capacity == 0:
            self._buckets.resize(1)
            self._buckets[0] = LinkedList()
        if key in self:
            raise DuplicateKeyError(key)
        self._bucket_for(key).append((key, value))
        self._size += 1

        capacity = self.capacity
        if self._size > self._fill_factor * capacity:
            if capacity > _INT_MAX / self._increase_factor:
                raise OverflowError("can not increase dictionary")
            self._rebuild(int(capacity * self._increase_factor))

    def remove(self, key: Hashable) -> None:
        """Delete the entry for ``key``; raise ``KeyError`` if there is none."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        self._bucket_for(key).erase(node)
        self._size -= 1

        capacity = self.capacity
        if self._size < self._fill_factor * capacity / self._increase_factor:
            self._rebuild(int(capacity / self._increase_factor))

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Hashable) -> Any:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value[1]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for _, key, _ in self.entries():
            yield key

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in bucket order."""
        for _, key, value in self.entries():
            yield key, value

    def entries(self) -> Iterator[tuple[int, Any, Any]]:
        """Yield ``(bucket_index, key, value)`` for every entry in bucket order."""
        for index, bucket in enumerate(self._buckets):
            for key, value in bucket:
                yield index, key, value

    def __repr__(self) -> str:
        return f"HashDictionary({dict(self.items())!r})"


def format_dictionary(dictionary: HashDictionary) -> str:
    """Render one ``index. < key, value>`` line per entry, then a blank line."""
    lines = "".join(
        f"{index}. < {key}, {value}>\n" for index, key, value in dictionary.entries()
    )
    return lines + "\n"