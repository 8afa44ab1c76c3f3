import pytest

from algodrills.graph import (
    EdgeSet,
    order_edge_set,
    reachable_bfs,
    reachable_dfs,
    to_adjacency_list,
)

EDGES = [
    (0, 1), (0, 2), (0, 4), (1, 3), (1, 4), (1, 8), (2, 5),
    (3, 7), (3, 8), (4, 8), (5, 6), (5, 8), (6, 7),
]


def test_order_edge_set_counts_vertices():
    assert order_edge_set(EDGES) == 9


def test_order_edge_set_empty():
    assert order_edge_set([]) == 0


def test_order_edge_set_requires_zero():
    with pytest.raises(ValueError, match="Minimum number of element must be zero"):
        order_edge_set([(1, 2)])


def test_order_edge_set_requires_sequential():
    with pytest.raises(ValueError, match="Elements must be sequential: 1 -> 3"):
        order_edge_set([(0, 1), (1, 3)])


def test_adjacency_list_small_example():
    assert to_adjacency_list([(0, 2), (0, 1)]) == [[1, 2], [0], [0]]


def test_adjacency_list_undirected_is_symmetric():
    graph = to_adjacency_list(EDGES)
    assert sum(len(n) for n in graph) == 2 * len(EDGES)
    for u, neighbours in enumerate(graph):
        assert neighbours == sorted(neighbours)
        for v in neighbours:
            assert u in graph[v]


def test_adjacency_list_directed_keeps_direction():
    graph = to_adjacency_list(EDGES, directed=True)
    assert sum(len(n) for n in graph) == len(EDGES)
    for u, v in EDGES:
        assert v in graph[u]


def test_edge_set_basics():
    edges = EdgeSet(EDGES)
    assert len(edges) == len(EDGES)
    assert edges[0] == EDGES[0]
    assert edges.order() == 9
    with pytest.raises(IndexError):
        edges[len(EDGES)]


def test_edge_set_adjacency_matches_edges():
    graph = EdgeSet(EDGES).to_adjacency_list()
    assert sum(len(n) for n in graph) == 2 * len(EDGES)
    for u, v in EDGES:
        assert v in graph[u] and u in graph[v]


def test_edge_set_validation():
    with pytest.raises(ValueError):
        EdgeSet([(2, 3)])


def test_search_orders():
    graph = [[1, 2], [0, 3], [0], [1]]
    assert reachable_dfs(graph, 0) == [0, 1, 3, 2]
    assert reachable_bfs(graph, 0) == [0, 1, 2, 3]


def test_searches_agree_on_reachable_set():
    graph = to_adjacency_list([(0, 1), (1, 2), (3, 4)])
    assert set(reachable_dfs(graph, 0)) == set(reachable_bfs(graph, 0)) == {0, 1, 2}
    assert set(reachable_dfs(graph, 4)) == {3, 4}


def test_search_start_out_of_range():
    with pytest.raises(IndexError):
        reachable_bfs([[1], [0]], 5)