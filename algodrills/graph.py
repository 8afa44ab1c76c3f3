"""Edge sets, adjacency lists and basic reachability searches."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]


def _vertex_count(edges: Iterable[Edge]) -> int:
    """Count the vertices named by *edges*, requiring them to be 0, 1, ..., n-1."""
    vertices = sorted({vertex for edge in edges for vertex in edge})
    if vertices:
        if vertices[0] != 0:
            raise ValueError("Minimum number of element must be zero")
        for prev, curr in zip(vertices, vertices[1:]):
            if curr - prev != 1:
                raise ValueError(f"Elements must be sequential: {prev} -> {curr}")
    return len(vertices)


class EdgeSet:
    """An ordered collection of undirected edges over vertices 0..n-1.

    Connectivity is not checked; only that the vertex labels are sequential
    and start at zero.
    """

    def __init__(self, edges: Iterable[Edge]) -> None:
        self._edges: tuple[Edge, ...] = tuple((u, v) for u, v in edges)
        self._order = _vertex_count(self._edges)

    def __len__(self) -> int:
        """Number of edges."""
        return len(self._edges)

    def __getitem__(self, index: int) -> Edge:
        if not 0 <= index < len(self._edges):
            raise IndexError(f"edge index out of range: {index}")
        return self._edges[index]

    def order(self) -> int:
        """Number of vertices."""
        return self._order

    def to_adjacency_list(self) -> list[list[int]]:
        """Undirected adjacency lists, neighbours in edge order."""
        graph: list[list[int]] = [[] for _ in range(self._order)]
        for u, v in self._edges:
            graph[u].append(v)
            graph[v].append(u)
        return graph


def order_edge_set(edges: Iterable[Edge]) -> int:
    """Return the number of vertices of an edge set.

    Raises ValueError unless the vertices are exactly 0..n-1.
    """
    return _vertex_count(list(edges))


def to_adjacency_list(edges: Iterable[Edge], directed: bool = False) -> list[list[int]]:
    """Convert an edge set into sorted adjacency lists."""
    edge_list = list(edges)
    graph: list[list[int]] = [[] for _ in range(_vertex_count(edge_list))]
    for u, v in edge_list:
        graph[u].append(v)
        if not directed:
            graph[v].append(u)
    for neighbours in graph:
        neighbours.sort()
    return graph


def _check_start(graph: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError(f"vertex out of range: {start}")


def reachable_dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reachable from *start*, in depth-first visiting order."""
    _check_start(graph, start)
    seen = [False] * len(graph)
    seen[start] = True
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for neighbour in stack[-1]:
            if not seen[neighbour]:
                seen[neighbour] = True
                order.append(neighbour)
                stack.append(iter(graph[neighbour]))
                break
        else:
            stack.pop()
    return order


def reachable_bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reachable from *start*, in breadth-first visiting order."""
    _check_start(graph, start)
    seen = [False] * len(graph)
    seen[start] = True
    order = [start]
    todo = deque([start])
    while todo:
        vertex = todo.popleft()
        for neighbour in graph[vertex]:
            if not seen[neighbour]:
                seen[neighbour] = True
                order.append(neighbour)
                todo.append(neighbour)
    return order