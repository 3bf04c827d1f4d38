"""FIFO queue and LIFO stack used by graph traversals."""

from __future__ import annotations

from collections import deque
from typing import Any

__all__ = ["Queue", "Stack"]


class Queue:
    """First-in, first-out container. ``None`` is never stored."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear; ``None`` is ignored."""
        if data is not None:
            self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()


class Stack:
    """Last-in, first-out container. ``None`` is never stored."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, data: Any) -> None:
        """Put ``data`` on top; ``None`` is ignored."""
        if data is not None:
            self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()