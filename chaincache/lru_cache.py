"""A fixed-capacity cache in front of a value-producing function."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

from chaincache.dictionary import HashDictionary
from chaincache.linked_list import LinkedList


class LRUCache:
    """Cache values produced by ``fetch``, evicting by access history.

    ``fetch`` signals that it has no value for a key by raising
    ``LookupError``; the error reaches the caller and the cache is left
    unchanged. A key that is hit moves to the back of the history; a newly
    fetched key is placed at the front, and when the cache is full the key
    at the front is evicted.
    """

    def __init__(
        self,
        fetch: Callable[[Any], Any],
        capacity: int,
        hash_function: Callable[[Any], int],
    ) -> None:
        if capacity <= 0:
            raise ValueError("invalid capacity")
        self._fetch = fetch
        self._capacity = capacity
        self._history = LinkedList()
        self._entries = HashDictionary(hash_function)

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key``, fetching it on a miss."""
        if key in self._entries:
            value, node = self._entries[key]
            self._history.erase(node)
            new_node = self._history.append(key)
            self._entries.remove(key)
            self._entries.add(key, (value, new_node))
            return value

        value = self._fetch(key)

        if len(self._history) == self._capacity:
            self._entries.remove(self._history.first())
            self._history.pop_first()

        node = self._history.prepend(key)
        self._entries.add(key, (value, node))
        return value

    def __len__(self) -> int:
        return len(self._history)

    def keys(self) -> list[Any]:
        """Return the cached keys, from the next to be evicted to the last."""
        return list(self._history)