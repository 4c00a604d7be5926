"""A doubly linked list whose nodes can be held and erased directly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Node:
    """A link in a :class:`LinkedList`; holds one value."""

    __slots__ = ("value", "prev", "next", "_owner")

    def __init__(self, value: Any, owner: LinkedList | None = None) -> None:
        self.value = value
        self.prev: Node | None = None
        self.next: Node | None = None
        self._owner = owner

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """A doubly linked list with index access and node-level erasure."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        if items is None:
            raise ValueError("Invalid argument")
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for length {self._size}")
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(index).value = value

    def first(self) -> Any:
        if self._head is None:
            raise IndexError("Index out of range")
        return self._head.value

    def last(self) -> Any:
        if self._tail is None:
            raise IndexError("Index out of range")
        return self._tail.value

    def first_node(self) -> Node | None:
        return self._head

    def last_node(self) -> Node | None:
        return self._tail

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes front to back; erasing the yielded node is safe."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def append(self, item: Any) -> Node:
        node = Node(item, self)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1
        return node

    def prepend(self, item: Any) -> Node:
        if self._head is None:
            return self.append(item)
        node = Node(item, self)
        node.next = self._head
        self._head.prev = node
        self._head = node
        self._size += 1
        return node

    def insert_at(self, item: Any, index: int) -> Node:
        """Insert ``item`` so that it ends up at ``index``.

        ``index`` must name an existing position.
        """
        successor = self._node_at(index)
        if successor is self._head:
            return self.prepend(item)
        node = Node(item, self)
        node.prev = successor.prev
        node.next = successor
        successor.prev.next = node
        successor.prev = node
        self._size += 1
        return node

    def _unlink(self, node: Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        node._owner = None
        self._size -= 1

    def remove(self, index: int) -> Any:
        """Remove the element at ``index`` and return its value."""
        node = self._node_at(index)
        self._unlink(node)
        return node.value

    def pop_first(self) -> Any:
        """Remove and return the first value; do nothing on an empty list."""
        if self._head is None:
            return None
        node = self._head
        self._unlink(node)
        return node.value

    def erase(self, node: Node) -> Node | None:
        """Remove ``node`` from this list and return the node that followed it."""
        if node is None or node._owner is not self:
            raise ValueError("node does not belong to this list")
        following = node.next
        self._unlink(node)
        return following

    def sublist(self, start: int, end: int) -> LinkedList:
        """Return the values from ``start`` up to but not including ``end``.

        ``end`` must itself be a valid index of this list.
        """
        if start < 0 or end < 0 or end >= self._size or end < start:
            raise IndexError("Invalid argument")
        result = LinkedList()
        node = self._node_at(start) if start < self._size else None
        for _ in range(end - start):
            result.append(node.value)
            node = node.next
        return result

    def concat(self, other: LinkedList) -> LinkedList:
        """Return a new list holding this list's values then ``other``'s."""
        result = LinkedList(self)
        for item in other:
            result.append(item)
        return result


def format_list(items: Iterable[Any]) -> str:
    """Render each element followed by a space, on one line."""
    return "".join(f"{item} " for item in items)