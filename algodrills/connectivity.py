"""Connectivity drills built on union-find."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from algodrills.graph import order_edge_set
from algodrills.union_find import UnionFind

Edge = tuple[int, int]


def bridges(edges: Sequence[Edge]) -> int:
    """Number of edges whose removal disconnects the graph.

    The graph must be connected with vertices numbered 0..n-1.
    """
    edge_list = list(edges)
    n = order_edge_set(edge_list)
    count = 0
    for removed in range(len(edge_list)):
        uf = UnionFind(n)
        for index, (u, v) in enumerate(edge_list):
            if index != removed:
                uf.unite(u, v)
        if uf.count_set() > 1:
            count += 1
    return count


def decay(edges: Sequence[Edge]) -> list[int]:
    """Number of components right after each edge collapses, edges collapsing in order."""
    edge_list = list(edges)
    uf = UnionFind(order_edge_set(edge_list))
    results = [0] * len(edge_list)
    for index in reversed(range(len(edge_list))):
        results[index] = uf.count_set()
        u, v = edge_list[index]
        uf.unite(u, v)
    return results


def cities(edge_sets: Iterable[Iterable[Edge]], n: int) -> list[int]:
    """For each of *n* cities, how many cities share its component in every edge set."""
    forests = []
    for edge_set in edge_sets:
        uf = UnionFind(n)
        for u, v in edge_set:
            uf.unite(u, v)
        forests.append(uf)
    keys = [tuple(uf.root(v) for uf in forests) for v in range(n)]
    counts = Counter(keys)
    return [counts[key] for key in keys]