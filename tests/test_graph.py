import pytest

from wgraph.edgelist import Edge
from wgraph.graph import INFINITY, AdjEntry, Graph

EDGES = [(0, 1, 7), (0, 2, 3), (1, 2, 4), (1, 3, 9), (1, 4, 11), (2, 3, 10)]


@pytest.fixture
def graph():
    g = Graph(5)
    for src, dst, weight in EDGES:
        g.insert_edge(src, dst, weight)
    return g


def test_new_graph_is_empty():
    g = Graph(5)
    assert str(g) == "order 5 size 0 (from to weight) "
    assert [v.name for v in g.vertices] == ["null"] * 5
    assert [v.nid for v in g.vertices] == list(range(5))


def test_negative_order_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_insert_counts_and_weights(graph):
    assert graph.size == len(EDGES)
    for src, dst, weight in EDGES:
        assert graph.edge_weight(src, dst) == weight


def test_edges_in_insertion_order(graph):
    assert list(graph.edges()) == [Edge(*e) for e in EDGES]


def test_str_lists_every_edge(graph):
    text = str(graph)
    assert text.startswith(f"order 5 size {len(EDGES)} (from to weight) ")
    for src, dst, weight in EDGES:
        assert f"({src} {dst} {weight}) " in text


def test_missing_edge_weight_is_infinity(graph):
    assert graph.edge_weight(3, 0) == INFINITY
    assert graph.edge_weight(2, 1) == INFINITY


def test_neighbors_are_in_insertion_order(graph):
    assert graph.neighbors(1) == [AdjEntry(2, 4), AdjEntry(3, 9), AdjEntry(4, 11)]


def test_delete_edge(graph):
    assert graph.delete_edge(1, 3) is True
    assert graph.size == len(EDGES) - 1
    assert graph.edge_weight(1, 3) == INFINITY
    assert graph.neighbors(1) == [AdjEntry(2, 4), AdjEntry(4, 11)]


def test_delete_missing_edge(graph):
    assert graph.delete_edge(4, 0) is False
    assert graph.size == len(EDGES)


def test_delete_all_edges(graph):
    for src, dst, _ in EDGES:
        assert graph.delete_edge(src, dst)
    assert graph.size == 0
    assert list(graph.edges()) == []


def test_delete_removes_only_first_duplicate():
    g = Graph(2)
    g.insert_edge(0, 1, 5)
    g.insert_edge(0, 1, 8)
    assert g.edge_weight(0, 1) == 5
    g.delete_edge(0, 1)
    assert g.edge_weight(0, 1) == 8
    assert g.size == 1


def test_bfs_order(graph):
    assert [v.nid for v in graph.bfs_order(0)] == [0, 1, 2, 3, 4]


def test_dfs_order(graph):
    assert [v.nid for v in graph.dfs_order(0)] == [0, 2, 3, 1, 4]


@pytest.mark.parametrize("start", range(5))
def test_traversals_visit_same_set_once(graph, start):
    bfs = [v.nid for v in graph.bfs_order(start)]
    dfs = [v.nid for v in graph.dfs_order(start)]
    assert len(bfs) == len(set(bfs))
    assert set(bfs) == set(dfs)
    assert bfs[0] == dfs[0] == start


def test_sink_vertex_visits_only_itself(graph):
    assert [v.nid for v in graph.bfs_order(4)] == [4]
    assert [v.nid for v in graph.dfs_order(4)] == [4]


def test_traversal_carries_names(graph):
    graph.vertices[0].name = "A"
    assert graph.bfs_order(0)[0].name == "A"


def test_insert_out_of_range_source_leaves_graph_unchanged(graph):
    with pytest.raises(IndexError):
        graph.insert_edge(5, 0, 1)
    assert graph.size == len(EDGES)
    assert list(graph.edges()) == [Edge(*e) for e in EDGES]


def test_insert_out_of_range_target_leaves_graph_unchanged(graph):
    with pytest.raises(IndexError):
        graph.insert_edge(0, 5, 1)
    assert graph.size == len(EDGES)
    assert list(graph.edges()) == [Edge(*e) for e in EDGES]


def test_edge_weight_out_of_range(graph):
    with pytest.raises(IndexError):
        graph.edge_weight(-1, 0)
    assert graph.edge_weight(0, 1) == 7


def test_delete_out_of_range_leaves_graph_unchanged(graph):
    with pytest.raises(IndexError):
        graph.delete_edge(7, 0)
    assert graph.size == len(EDGES)
    assert list(graph.edges()) == [Edge(*e) for e in EDGES]


def test_bfs_out_of_range(graph):
    with pytest.raises(IndexError):
        graph.bfs_order(5)
    assert [v.nid for v in graph.bfs_order(0)] == [0, 1, 2, 3, 4]


def test_dfs_out_of_range(graph):
    with pytest.raises(IndexError):
        graph.dfs_order(5)
    assert [v.nid for v in graph.dfs_order(0)] == [0, 2, 3, 1, 4]


def test_neighbors_out_of_range(graph):
    with pytest.raises(IndexError):
        graph.neighbors(5)
    assert graph.neighbors(0) == [AdjEntry(1, 7), AdjEntry(2, 3)]