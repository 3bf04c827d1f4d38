"""Directed, weighted graph stored as adjacency lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from wgraph.edgelist import Edge
from wgraph.queue_stack import Queue, Stack

__all__ = ["INFINITY", "AdjEntry", "Vertex", "Graph"]

INFINITY = 99999
"""Weight reported for an edge that does not exist."""


@dataclass
class AdjEntry:
    """An outgoing edge in a vertex's adjacency list."""

    nid: int
    weight: int


@dataclass
class Vertex:
    """A graph vertex with its name and outgoing edges."""

    nid: int
    name: str = "null"
    neighbors: list[AdjEntry] = field(default_factory=list)


class Graph:
    """A graph with a fixed number of vertices numbered from 0."""

    def __init__(self, order: int) -> None:
        if order < 0:
            raise ValueError("order must not be negative")
        self.order = order
        self.size = 0
        self.vertices = [Vertex(nid) for nid in range(order)]

    def _vertex(self, nid: int) -> Vertex:
        if not 0 <= nid < self.order:
            raise IndexError(f"vertex {nid} out of range")
        return self.vertices[nid]

    def insert_edge(self, src: int, dst: int, weight: int) -> None:
        """Append an edge from ``src`` to ``dst`` to the adjacency list of ``src``."""
        self._vertex(dst)
        self._vertex(src).neighbors.append(AdjEntry(dst, weight))
        self.size += 1

    def delete_edge(self, src: int, dst: int) -> bool:
        """Remove the first edge from ``src`` to ``dst``; return whether one was found."""
        neighbors = self._vertex(src).neighbors
        for entry in neighbors:
            if entry.nid == dst:
                neighbors.remove(entry)
                self.size -= 1
                return True
        return False

    def edge_weight(self, src: int, dst: int) -> int:
        """Weight of the first edge from ``src`` to ``dst``, or INFINITY if there is none."""
        return next(
            (entry.weight for entry in self._vertex(src).neighbors if entry.nid == dst),
            INFINITY,
        )

    def neighbors(self, nid: int) -> list[AdjEntry]:
        """The outgoing edges of ``nid`` in insertion order."""
        return list(self._vertex(nid).neighbors)

    def bfs_order(self, start: int) -> list[Vertex]:
        """Vertices reachable from ``start`` in breadth-first order."""
        visited = [False] * self.order
        queue = Queue()
        queue.enqueue(self._vertex(start))
        visited[start] = True
        result: list[Vertex] = []
        while queue:
            vertex = queue.dequeue()
            result.append(vertex)
            for entry in vertex.neighbors:
                if not visited[entry.nid]:
                    visited[entry.nid] = True
                    queue.enqueue(self.vertices[entry.nid])
        return result

    def dfs_order(self, start: int) -> list[Vertex]:
        """Vertices reachable from ``start`` in the order a stack-driven search pops them.

        A vertex is marked visited when pushed, so each is reported once.
        """
        visited = [False] * self.order
        stack = Stack()
        stack.push(self._vertex(start))
        visited[start] = True
        result: list[Vertex] = []
        while stack:
            vertex = stack.pop()
            result.append(vertex)
            for entry in vertex.neighbors:
                if not visited[entry.nid]:
                    visited[entry.nid] = True
                    stack.push(self.vertices[entry.nid])
        return result

    def edges(self) -> Iterator[Edge]:
        """Every edge, grouped by source vertex in insertion order."""
        for vertex in self.vertices:
            for entry in vertex.neighbors:
                yield Edge(vertex.nid, entry.nid, entry.weight)

    def __str__(self) -> str:
        body = "".join(f"({e.src} {e.dst} {e.weight}) " for e in self.edges())
        return f"order {self.order} size {self.size} (from to weight) {body}"