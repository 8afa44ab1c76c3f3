import pytest

from algodrills.graph import reachable_bfs, reachable_dfs
from algodrills.graph_search import (
    UnreachableError,
    Vertex,
    bfs_distances,
    count_connected,
    exists_path_by_bfs,
    exists_path_by_recursive,
    is_bipartite_by_bfs,
    is_bipartite_by_recursive,
    locate_start_and_goal,
    shortest_path,
    topological_sort,
    tree,
)

GRAPH = [
    (0, 1), (0, 2), (0, 4), (1, 3), (1, 4), (1, 8), (2, 5),
    (3, 7), (3, 8), (4, 8), (5, 6), (5, 8), (6, 7),
]

SPLIT_GRAPH = [
    (0, 1), (0, 4), (1, 3), (1, 4), (1, 8), (2, 5), (3, 8), (4, 8), (6, 7),
]

NO_PATH_GRAPH = [
    (0, 1), (0, 2), (0, 4), (1, 3), (1, 4), (1, 8), (2, 5),
    (3, 8), (4, 8), (5, 8), (6, 7),
]

MAZE = [
    ".#....#G",
    ".#.#....",
    "...#.##.",
    "#.##...#",
    "...###.#",
    ".#.....#",
    "...#.#..",
    "S.......",
]


def test_bfs_distances_example():
    assert bfs_distances(GRAPH, 0) == [0, 1, 1, 2, 1, 2, 3, 3, 2]


def test_bfs_distances_unreachable():
    with pytest.raises(UnreachableError):
        bfs_distances([(0, 1), (2, 3)], 0)


def test_bfs_distances_start_out_of_range():
    with pytest.raises(IndexError):
        bfs_distances(GRAPH, 9)


def test_tree_example():
    edges = [(0, 1), (0, 2), (1, 3), (1, 4), (1, 5), (4, 7), (4, 8), (2, 6), (6, 9)]
    assert tree(edges, 0) == [
        Vertex(0, 10),
        Vertex(1, 6),
        Vertex(1, 3),
        Vertex(2, 1),
        Vertex(2, 3),
        Vertex(2, 1),
        Vertex(2, 2),
        Vertex(3, 1),
        Vertex(3, 1),
        Vertex(3, 1),
    ]


def test_tree_root_size_is_vertex_count():
    edges = [(0, 1), (0, 2), (1, 3), (1, 4), (1, 5), (4, 7), (4, 8), (2, 6), (6, 9)]
    for root in range(10):
        result = tree(edges, root)
        assert result[root].depth == 0
        assert result[root].size == 10


def test_tree_unreached_vertices_stay_empty():
    result = tree([(0, 1), (2, 3)], 0)
    assert result[2] == Vertex()
    assert result[3] == Vertex()


@pytest.mark.parametrize("search", [reachable_dfs, reachable_bfs])
@pytest.mark.parametrize("edges, gold", [(GRAPH, 1), (SPLIT_GRAPH, 3)])
def test_count_connected(edges, gold, search):
    assert count_connected(edges, search) == gold


def test_path_exists():
    assert exists_path_by_recursive(GRAPH, (0, 7)) is True
    assert exists_path_by_bfs(GRAPH, (0, 7)) is True


def test_path_not_exists():
    assert exists_path_by_recursive(NO_PATH_GRAPH, (0, 7)) is False
    assert exists_path_by_bfs(NO_PATH_GRAPH, (0, 7)) is False


def test_path_target_out_of_range():
    with pytest.raises(IndexError):
        exists_path_by_recursive(GRAPH, (0, 20))


def test_bipartite():
    edges = [(0, 1), (0, 3), (1, 2), (1, 4), (3, 4)]
    assert is_bipartite_by_recursive(edges) is True
    assert is_bipartite_by_bfs(edges) is True


def test_not_bipartite():
    edges = [(0, 1), (0, 3), (1, 2), (1, 4), (3, 4), (2, 4)]
    assert is_bipartite_by_recursive(edges) is False
    assert is_bipartite_by_bfs(edges) is False


def test_bipartite_empty_graph():
    with pytest.raises(IndexError):
        is_bipartite_by_bfs([])
    with pytest.raises(IndexError):
        is_bipartite_by_recursive([])


def test_locate_start_and_goal():
    assert locate_start_and_goal(MAZE, (8, 8)) == ((7, 0), (0, 7))


def test_shortest_path():
    assert shortest_path(MAZE, (8, 8)) == 16


def test_shortest_path_impossible():
    maze = list(MAZE)
    maze[1] = ".#.#...#"
    with pytest.raises(UnreachableError):
        shortest_path(maze, (8, 8))


def test_shortest_path_start_missing():
    maze = list(MAZE)
    maze[1] = ".#.#...#"
    maze[7] = "#......."
    with pytest.raises(ValueError):
        shortest_path(maze, (8, 8))


def test_shortest_path_goal_missing():
    maze = list(MAZE)
    maze[0] = ".#....##"
    maze[1] = ".#.#...#"
    with pytest.raises(ValueError):
        shortest_path(maze, (8, 8))


DAG = [
    (0, 5), (1, 3), (1, 6), (2, 5), (2, 7), (3, 0),
    (3, 7), (4, 1), (4, 2), (4, 6), (6, 7), (7, 0),
]


def test_topological_sort_example():
    assert topological_sort(DAG) == [4, 2, 1, 6, 3, 7, 0, 5]


def test_topological_sort_respects_edges():
    order = topological_sort(DAG)
    position = {vertex: index for index, vertex in enumerate(order)}
    assert sorted(order) == list(range(8))
    for u, v in DAG:
        assert position[u] < position[v]