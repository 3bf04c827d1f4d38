# wgraph

wgraph is a small pure-Python library for weighted directed graphs. Vertices are
integer ids. It has no dependencies outside the standard library.

## What is in it

- `wgraph.graph`
  - `Graph(order)` holds vertices `0 .. order-1`. Each vertex is a `Vertex`
    with a `name` (default `"null"`) and a list of outgoing `AdjEntry(nid, weight)`.
  - `insert_edge(src, dst, weight)` adds an edge to the end of the adjacency list of `src`.
  - `delete_edge(src, dst)` removes the first matching edge and returns whether
    it found one.
  - `edge_weight(src, dst)` returns the weight of the first matching edge. If
    there is no such edge it returns `INFINITY` (99999).
  - `neighbors(nid)` returns the outgoing edges of a vertex.
  - `edges()` yields every edge as an `Edge`.
  - `bfs_order(start)` and `dfs_order(start)` return the reachable vertices in
    breadth-first order and in stack-driven depth-first order.
  - `str(graph)` gives `order N size M (from to weight) (a b w) ...`.
  - A vertex id outside the graph raises `IndexError`.
- `wgraph.algorithm`
  - `mst_prim(graph, start)` returns Prim's minimum spanning tree of the part of
    the graph reachable from `start`.
  - `spt_dijkstra(graph, start)` returns Dijkstra's shortest-path tree. Edges
    are listed in the order their targets are settled.
  - `sp_dijkstra(graph, start, end)` returns the edges of a shortest path in
    path order. It raises `ValueError` if `end` cannot be reached.
  - Each of these returns an `EdgeList`.
- `wgraph.edgelist`
  - `Edge(src, dst, weight)` is a single edge.
  - `EdgeList` supports `append`, `prepend`, `delete(src, dst)`,
    `total_weight()`, `len()` and iteration.
  - `str(edgelist)` gives `size N (from to weight) ...`.
- `wgraph.heap`
  - `MinHeap` is a binary min-heap of `HeapItem(key, value)` pairs. It supports
    `insert`, `find_min`, `extract_min`, `change_key(index, new_key)` (which
    returns the item's new position) and `search_value(value)` (which returns a
    position or `None`).
  - `find_min` and `extract_min` raise `IndexError` when the heap is empty.
  - `heap_sort(items)` returns a new list ordered by key from largest to smallest.
- `wgraph.queue_stack`
  - `Queue` and `Stack` are FIFO and LIFO containers. They ignore `None`.
  - `dequeue` and `pop` raise `IndexError` when the container is empty.

## Installation

```
pip install .
```

## Usage

```python
from wgraph.graph import Graph
from wgraph.algorithm import mst_prim, spt_dijkstra, sp_dijkstra

g = Graph(5)
for src, dst, w in [(0, 1, 7), (0, 2, 3), (1, 2, 4), (1, 3, 9), (1, 4, 11), (2, 3, 10)]:
    g.insert_edge(src, dst, w)
    g.insert_edge(dst, src, w)

print([v.nid for v in g.bfs_order(0)])
print(g.edge_weight(0, 2))    # 3

mst = mst_prim(g, 0)
print(mst, mst.total_weight())

for edge in sp_dijkstra(g, 0, 3):
    print(edge.src, edge.dst, edge.weight)
```

## Demo

The `wgraph-demo` command builds a five-vertex sample graph with vertices named
A to E. It prints:

- the graph after each edge is inserted,
- the weight of each edge,
- the breadth-first and depth-first orders from every vertex,
- the graph after each edge is deleted.

```
wgraph-demo
```

The command takes no options. The same graph is available in code from
`wgraph.demo.build_demo_graph()`. `wgraph.demo.run_demo(out)` writes the same
output to any text stream.

## Limitations

Graphs are built in code only. The package does not read or write graph files.
Apart from the fixed demo, it has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```