"""Walk-through of the graph operations on a small five-vertex graph."""

from __future__ import annotations

import sys
from typing import TextIO

from wgraph.graph import Graph

__all__ = ["NODES", "EDGES", "build_demo_graph", "run_demo", "main"]

ORDER = 5
NODES = [(0, "A"), (1, "B"), (2, "C"), (3, "D"), (4, "E")]
EDGES = [(0, 1, 7), (0, 2, 3), (1, 2, 4), (1, 3, 9), (1, 4, 11), (2, 3, 10)]

_RULE = "------------------\n"


def _named_graph() -> Graph:
    graph = Graph(ORDER)
    for nid, name in NODES:
        if nid < ORDER:
            graph.vertices[nid].name = name
    return graph


def build_demo_graph() -> Graph:
    """The demo graph with its vertex names and edges."""
    graph = _named_graph()
    for src, dst, weight in EDGES:
        graph.insert_edge(src, dst, weight)
    return graph


def _path(vertices) -> str:
    return "".join(f"({v.nid} {v.name})" for v in vertices)


def run_demo(out: TextIO) -> None:
    """Write the full walk-through to ``out``."""
    out.write(_RULE + "Test: new_graph\n\n")
    graph = _named_graph()
    out.write(f"display_graph(): {graph}\n")

    out.write(_RULE + "Test: insert_edge_graph\n\n")
    for src, dst, weight in EDGES:
        graph.insert_edge(src, dst, weight)
        out.write(f"insert_edge_graph({src} {dst} {weight}): {graph}\n")

    out.write(_RULE + "Test: get_edge_weigh\n\n")
    for src, dst, _ in EDGES:
        out.write(f"get_edge_weight({src} {dst}): {graph.edge_weight(src, dst)}\n")
    out.write("\n")

    out.write(_RULE + "Test: test_traverse_bforder\n\n")
    for nid in range(graph.order):
        out.write(f"traverse_bforder({nid}): {_path(graph.bfs_order(nid))}\n")
    out.write("\n")

    out.write(_RULE + "Test: test_traverse_dforder\n\n")
    for nid in range(graph.order):
        out.write(f"traverse_dforder({nid}): {_path(graph.dfs_order(nid))}\n")
    out.write("\n")

    out.write(_RULE + "Test: test_delete_edge_graph\n\n")
    for src, dst, _ in EDGES:
        graph.delete_edge(src, dst)
        out.write(f"delete_edge_graph({src} {dst}): {graph}\n")
    out.write("\n")


def main(argv=None) -> int:
    """Print the walk-through to standard output."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())