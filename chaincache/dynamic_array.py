"""A fixed-capacity array whose capacity can be changed explicitly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class DynamicArray:
    """An array of a set number of slots, all present from creation.

    New slots hold ``None``. Indices are checked strictly: negative
    indices are rejected rather than counted from the end.
    """

    __slots__ = ("_elements",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("Invalid size")
        self._elements: list[Any] = [None] * size

    @classmethod
    def from_items(cls, items: Iterable[Any]) -> DynamicArray:
        """Build an array holding a copy of ``items``."""
        if items is None:
            raise ValueError("Invalid argument in constructor")
        array = cls()
        array._elements = list(items)
        return array

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._elements):
            raise IndexError(f"index {index} out of range for capacity {len(self._elements)}")

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._elements[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._elements[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicArray.from_items({self._elements!r})"

    def resize(self, new_capacity: int) -> None:
        """Change the capacity, keeping the leading elements that still fit."""
        if new_capacity < 0:
            raise ValueError("Invalid argument")
        current = len(self._elements)
        if new_capacity <= current:
            del self._elements[new_capacity:]
        else:
            self._elements.extend([None] * (new_capacity - current))

    def delete(self, index: int) -> None:
        """Remove the element at ``index``, shrinking the capacity by one."""
        self._check_index(index)
        del self._elements[index]

    def swap(self, other: DynamicArray) -> None:
        """Exchange contents and capacity with ``other``."""
        self._elements, other._elements = other._elements, self._elements


def format_array(array: Iterable[Any]) -> str:
    """Render each element followed by a space, on one line."""
    return "".join(f"{item} " for item in array)