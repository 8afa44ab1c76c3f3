"""Graph search drills: distances, trees, components, paths, bipartiteness, mazes."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from algodrills.graph import to_adjacency_list

Edge = tuple[int, int]
Point = tuple[int, int]
Graph = Sequence[Sequence[int]]

_WALL = "#"
_START = "S"
_GOAL = "G"
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class UnreachableError(LookupError):
    """Raised when a vertex or cell cannot be reached from the start."""


@dataclass
class Vertex:
    """Depth from the root and size of the subtree of one tree vertex.

    Both stay None for vertices the search never reached.
    """

    depth: int | None = None
    size: int | None = None


class _Color(Enum):
    RED = 0
    BLUE = 1

    @property
    def opposite(self) -> _Color:
        return _Color.BLUE if self is _Color.RED else _Color.RED


def _check_vertex(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < len(graph):
        raise IndexError(f"vertex out of range: {vertex}")


def bfs_distances(edges: Iterable[Edge], start: int) -> list[int]:
    """Distance in edges from *start* to every vertex of an undirected graph.

    Raises UnreachableError if some vertex cannot be reached.
    """
    graph = to_adjacency_list(edges)
    _check_vertex(graph, start)
    dists: list[int | None] = [None] * len(graph)
    dists[start] = 0
    todo = deque([start])
    while todo:
        vertex = todo.popleft()
        for neighbour in graph[vertex]:
            if dists[neighbour] is None:
                dists[neighbour] = dists[vertex] + 1
                todo.append(neighbour)
    result: list[int] = []
    for vertex, dist in enumerate(dists):
        if dist is None:
            raise UnreachableError(f"vertex {vertex} is unreachable from {start}")
        result.append(dist)
    return result


def tree(edges: Iterable[Edge], root: int) -> list[Vertex]:
    """Depth and subtree size of every vertex of a tree rooted at *root*."""
    graph = to_adjacency_list(edges)
    _check_vertex(graph, root)
    vertices = [Vertex() for _ in graph]
    vertices[root].depth = 0
    vertices[root].size = 1
    stack = [(root, iter(graph[root]))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            child = vertices[neighbour]
            if child.depth is None:
                child.depth = vertices[vertex].depth + 1
                child.size = 1
                stack.append((neighbour, iter(graph[neighbour])))
                break
        else:
            stack.pop()
            if stack:
                vertices[stack[-1][0]].size += vertices[vertex].size
    return vertices


def count_connected(
    edges: Iterable[Edge], search: Callable[[Graph, int], Iterable[int]]
) -> int:
    """Number of connected components, found with *search* (graph, start) -> reached."""
    graph = to_adjacency_list(edges)
    seen = [False] * len(graph)
    count = 0
    for vertex in range(len(graph)):
        if not seen[vertex]:
            for reached in search(graph, vertex):
                seen[reached] = True
            count += 1
    return count


def exists_path_by_recursive(edges: Iterable[Edge], path: tuple[int, int]) -> bool:
    """Whether the directed graph has a path from path[0] to path[1], by depth-first search."""
    graph = to_adjacency_list(edges, True)
    start, target = path
    _check_vertex(graph, start)
    _check_vertex(graph, target)
    seen = [False] * len(graph)
    seen[start] = True
    stack = [start]
    while stack:
        vertex = stack.pop()
        for neighbour in reversed(graph[vertex]):
            if not seen[neighbour]:
                seen[neighbour] = True
                stack.append(neighbour)
    return seen[target]


def exists_path_by_bfs(edges: Iterable[Edge], path: tuple[int, int]) -> bool:
    """Whether the directed graph has a non-empty path from path[0] to path[1], by BFS."""
    graph = to_adjacency_list(edges, True)
    start, target = path
    _check_vertex(graph, start)
    seen = [False] * len(graph)
    seen[start] = True
    todo = deque([start])
    while todo:
        vertex = todo.popleft()
        for neighbour in graph[vertex]:
            if neighbour == target:
                return True
            if not seen[neighbour]:
                seen[neighbour] = True
                todo.append(neighbour)
    return False


def is_bipartite_by_recursive(edges: Iterable[Edge]) -> bool:
    """Whether the component of vertex 0 is bipartite, by depth-first colouring."""
    graph = to_adjacency_list(edges)
    _check_vertex(graph, 0)
    colors: list[_Color | None] = [None] * len(graph)
    colors[0] = _Color.BLUE
    stack = [(0, iter(graph[0]))]
    while stack:
        vertex, neighbours = stack[-1]
        current = colors[vertex]
        for neighbour in neighbours:
            color = colors[neighbour]
            if color is None:
                colors[neighbour] = current.opposite
                stack.append((neighbour, iter(graph[neighbour])))
                break
            if color is current:
                return False
        else:
            stack.pop()
    return True


def is_bipartite_by_bfs(edges: Iterable[Edge]) -> bool:
    """Whether the component of vertex 0 is bipartite, by breadth-first colouring."""
    graph = to_adjacency_list(edges)
    _check_vertex(graph, 0)
    colors: list[_Color | None] = [None] * len(graph)
    colors[0] = _Color.RED
    todo = deque([0])
    while todo:
        vertex = todo.popleft()
        current = colors[vertex]
        for neighbour in graph[vertex]:
            color = colors[neighbour]
            if color is None:
                colors[neighbour] = current.opposite
                todo.append(neighbour)
            elif color is current:
                return False
    return True


def locate_start_and_goal(
    maze: Sequence[str], dimensions: tuple[int, int]
) -> tuple[Point, Point]:
    """Positions (row, column) of 'S' and 'G' in a maze of the given height and width."""
    height, width = dimensions
    start: Point | None = None
    goal: Point | None = None
    for row in range(height):
        for col in range(width):
            cell = maze[row][col]
            if cell == _START:
                start = (row, col)
            elif cell == _GOAL:
                goal = (row, col)
    if start is None or goal is None:
        raise ValueError("No start or goal point exist in the maze")
    return start, goal


def shortest_path(maze: Sequence[str], dimensions: tuple[int, int]) -> int:
    """Fewest steps from 'S' to 'G' moving between non-'#' cells.

    Raises UnreachableError if the goal cannot be reached.
    """
    start, goal = locate_start_and_goal(maze, dimensions)
    height, width = dimensions
    dists: dict[Point, int] = {start: 0}
    todo = deque([start])
    while todo:
        row, col = todo.popleft()
        for d_row, d_col in _STEPS:
            nxt = (row + d_row, col + d_col)
            n_row, n_col = nxt
            if not (0 <= n_row < height and 0 <= n_col < width):
                continue
            if maze[n_row][n_col] == _WALL or nxt in dists:
                continue
            dists[nxt] = dists[(row, col)] + 1
            todo.append(nxt)
    try:
        return dists[goal]
    except KeyError:
        raise UnreachableError("goal is unreachable from start") from None


def topological_sort(edges: Iterable[Edge]) -> list[int]:
    """A topological order of a directed acyclic graph, from depth-first post-order."""
    graph = to_adjacency_list(edges, True)
    seen = [False] * len(graph)
    order: list[int] = []
    for root in range(len(graph)):
        if seen[root]:
            continue
        seen[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    order.reverse()
    return order