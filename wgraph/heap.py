"""Binary min-heap of key/value pairs with key updates and a heap sort."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional

__all__ = ["HeapItem", "MinHeap", "heap_sort"]


@dataclass(frozen=True)
class HeapItem:
    """An entry of the heap: ordered by ``key``, carrying ``value``."""

    key: int
    value: int


def _sift_up(items: list[HeapItem], index: int) -> int:
    """Move ``items[index]`` towards the root; return its final position."""
    while index > 0:
        parent = (index - 1) // 2
        if items[index].key < items[parent].key:
            items[index], items[parent] = items[parent], items[index]
            index = parent
        else:
            break
    return index


def _sift_down(items: list[HeapItem], size: int, index: int) -> int:
    """Move ``items[index]`` towards the leaves within ``size``; return its final position."""
    while True:
        left = 2 * index + 1
        right = left + 1
        smallest = index
        if left < size and items[left].key < items[smallest].key:
            smallest = left
        if right < size and items[right].key < items[smallest].key:
            smallest = right
        if smallest == index:
            return index
        items[index], items[smallest] = items[smallest], items[index]
        index = smallest


class MinHeap:
    """Array-backed min-heap; the smallest key is always at position 0."""

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[HeapItem]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> HeapItem:
        return self._items[index]

    def insert(self, item: HeapItem) -> None:
        """Add ``item``, doubling the nominal capacity when full."""
        if len(self._items) == self.capacity:
            self.capacity *= 2
        self._items.append(item)
        _sift_up(self._items, len(self._items) - 1)

    def find_min(self) -> HeapItem:
        """Return the item with the smallest key without removing it."""
        if not self._items:
            raise IndexError("find_min from an empty heap")
        return self._items[0]

    def extract_min(self) -> HeapItem:
        """Remove and return the item with the smallest key."""
        if not self._items:
            raise IndexError("extract_min from an empty heap")
        if len(self._items) <= self.capacity // 4 and self.capacity > 4:
            self.capacity //= 2
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, len(self._items), 0)
        return smallest

    def change_key(self, index: int, new_key: int) -> int:
        """Set the key of the item at ``index`` and return the item's new position."""
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")
        old_key = self._items[index].key
        self._items[index] = replace(self._items[index], key=new_key)
        if old_key < new_key:
            return _sift_down(self._items, len(self._items), index)
        return _sift_up(self._items, index)

    def search_value(self, value: int) -> Optional[int]:
        """Return the position of the first item holding ``value``, or None."""
        return next(
            (pos for pos, item in enumerate(self._items) if item.value == value),
            None,
        )


def heap_sort(items) -> list[HeapItem]:
    """Return the items ordered by key from largest to smallest.

    A min-heap is built and its minimum repeatedly moved to the end,
    which leaves the keys in non-increasing order.
    """
    result = list(items)
    size = len(result)
    for index in reversed(range(size // 2)):
        _sift_down(result, size, index)
    for end in reversed(range(1, size)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result