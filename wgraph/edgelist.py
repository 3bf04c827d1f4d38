"""Ordered list of weighted edges."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

__all__ = ["Edge", "EdgeList"]


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    src: int
    dst: int
    weight: int


class EdgeList:
    """A sequence of edges that can grow at either end."""

    def __init__(self) -> None:
        self._edges: deque[Edge] = deque()

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(list(self._edges))

    def append(self, src: int, dst: int, weight: int) -> None:
        """Add an edge at the end."""
        self._edges.append(Edge(src, dst, weight))

    def prepend(self, src: int, dst: int, weight: int) -> None:
        """Add an edge at the start."""
        self._edges.appendleft(Edge(src, dst, weight))

    def delete(self, src: int, dst: int) -> bool:
        """Remove the first edge from ``src`` to ``dst``; return whether one was found."""
        for edge in self._edges:
            if edge.src == src and edge.dst == dst:
                self._edges.remove(edge)
                return True
        return False

    def total_weight(self) -> int:
        """Sum of all edge weights."""
        return sum(edge.weight for edge in self._edges)

    def __str__(self) -> str:
        body = "".join(f"({e.src} {e.dst} {e.weight}) " for e in self._edges)
        return f"size {len(self._edges)} (from to weight) {body}"