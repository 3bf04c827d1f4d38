"""Weighted directed graphs with traversal, minimum spanning tree and shortest-path algorithms."""

__version__ = "0.1.0"

__all__ = ["algorithm", "demo", "edgelist", "graph", "heap", "queue_stack"]