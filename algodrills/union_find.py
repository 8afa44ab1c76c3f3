"""Disjoint-set forest with path compression and union by size."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the elements 0..n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._n = n
        self._parents: list[int | None] = [None] * n
        self._sizes = [1] * n

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"element out of range: {v}")

    def root(self, v: int) -> int:
        """Representative of the set holding *v*."""
        self._check(v)
        path = []
        while (parent := self._parents[v]) is not None:
            path.append(v)
            v = parent
        for node in path:
            self._parents[node] = v
        return v

    def is_same_set(self, u: int, v: int) -> bool:
        return self.root(u) == self.root(v)

    def unite(self, u: int, v: int) -> bool:
        """Merge the sets of *u* and *v*; False if they were already one."""
        root_u, root_v = self.root(u), self.root(v)
        if root_u == root_v:
            return False
        if self._sizes[root_u] < self._sizes[root_v]:
            root_u, root_v = root_v, root_u
        self._parents[root_v] = root_u
        self._sizes[root_u] += self._sizes[root_v]
        return True

    def size(self, v: int) -> int:
        """Number of elements in the set holding *v*."""
        return self._sizes[self.root(v)]

    def count_set(self) -> int:
        """Number of disjoint sets."""
        return sum(1 for parent in self._parents if parent is None)