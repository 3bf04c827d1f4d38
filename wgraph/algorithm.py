"""Minimum spanning tree and shortest paths over a Graph."""

from __future__ import annotations

import math

from wgraph.edgelist import EdgeList
from wgraph.graph import Graph
from wgraph.heap import HeapItem, MinHeap

__all__ = ["mst_prim", "spt_dijkstra", "sp_dijkstra"]


def mst_prim(graph: Graph, start: int) -> EdgeList:
    """Prim's minimum spanning tree of the part of ``graph`` reachable from ``start``.

    Edges are listed in the order their target vertices join the tree.
    """
    graph.neighbors(start)
    in_tree = [False] * graph.order
    parent: list[int | None] = [None] * graph.order
    heap = MinHeap(4)
    mst = EdgeList()

    def consider(u: int) -> None:
        for entry in graph.neighbors(u):
            v = entry.nid
            if in_tree[v]:
                continue
            pos = heap.search_value(v)
            if pos is None:
                heap.insert(HeapItem(entry.weight, v))
                parent[v] = u
            elif entry.weight < heap[pos].key:
                heap.change_key(pos, entry.weight)
                parent[v] = u

    in_tree[start] = True
    consider(start)
    while heap:
        item = heap.extract_min()
        u = item.value
        in_tree[u] = True
        mst.append(parent[u], u, item.key)
        consider(u)
    return mst


def _dijkstra(graph: Graph, start: int) -> tuple[EdgeList, list[float], list[int | None]]:
    graph.neighbors(start)
    done = [False] * graph.order
    label: list[float] = [math.inf] * graph.order
    parent: list[int | None] = [None] * graph.order
    heap = MinHeap(4)
    tree = EdgeList()

    def relax(u: int) -> None:
        for entry in graph.neighbors(u):
            v = entry.nid
            distance = label[u] + entry.weight
            if not done[v] and distance < label[v]:
                label[v] = distance
                parent[v] = u
                pos = heap.search_value(v)
                if pos is None:
                    heap.insert(HeapItem(distance, v))
                else:
                    heap.change_key(pos, distance)

    label[start] = 0
    done[start] = True
    relax(start)
    while heap:
        item = heap.extract_min()
        u = item.value
        done[u] = True
        label[u] = item.key
        tree.append(parent[u], u, label[u] - label[parent[u]])
        relax(u)
    return tree, label, parent


def spt_dijkstra(graph: Graph, start: int) -> EdgeList:
    """Dijkstra's shortest-path tree from ``start``, edges in order of settling."""
    tree, _, _ = _dijkstra(graph, start)
    return tree


def sp_dijkstra(graph: Graph, start: int, end: int) -> EdgeList:
    """Edges of a shortest path from ``start`` to ``end``, in path order.

    Raises ValueError when ``end`` cannot be reached from ``start``.
    """
    graph.neighbors(end)
    _, label, parent = _dijkstra(graph, start)
    path = EdgeList()
    node = end
    while node != start:
        prev = parent[node]
        if prev is None:
            raise ValueError(f"vertex {end} is not reachable from {start}")
        path.prepend(prev, node, label[node] - label[prev])
        node = prev
    return path