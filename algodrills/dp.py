"""Dynamic-programming drills: knapsack variants, LCS and interval DP."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

INF = 1 << 29

_ACTIVITIES = 3


def happy_max(z: Iterable[Sequence[int]]) -> int:
    """Best total happiness choosing one of three activities per day, never
    the same activity on two consecutive days."""
    best = (0,) * _ACTIVITIES
    for row in z:
        best = tuple(
            max(best[k] for k in range(_ACTIVITIES) if k != j) + row[j]
            for j in range(_ACTIVITIES)
        )
    return max(best)


def _check_target(w: int) -> None:
    if w < 0:
        raise ValueError("target must not be negative")


def _check_limit(k: int) -> None:
    if k < 0:
        raise ValueError("K must be not negative")


def subset_sum_pull(w: int, a: Iterable[int]) -> bool:
    """Whether a subset of *a* sums to *w*; each cell pulls from the previous row."""
    _check_target(w)
    row = [True] + [False] * w
    for value in a:
        row = [
            row[t] or (0 <= t - value <= w and row[t - value])
            for t in range(w + 1)
        ]
    return row[w]


def subset_sum_push(w: int, a: Iterable[int]) -> bool:
    """Whether a subset of *a* sums to *w*; each cell pushes into the next row."""
    _check_target(w)
    row = [True] + [False] * w
    for value in a:
        following = [False] * (w + 1)
        for t, reachable in enumerate(row):
            if reachable:
                following[t] = True
                if 0 <= t + value <= w:
                    following[t + value] = True
        row = following
    return row[w]


def subset_sum_within_pull(w: int, k: int, a: Iterable[int]) -> bool:
    """Whether at most *k* items of *a* sum to *w* (pull formulation)."""
    _check_limit(k)
    _check_target(w)
    row = [0] + [INF] * w
    for value in a:
        row = [
            min(row[t], row[t - value] + 1) if 0 <= t - value <= w else row[t]
            for t in range(w + 1)
        ]
    return row[w] <= k


def subset_sum_within_push(w: int, k: int, a: Iterable[int]) -> bool:
    """Whether at most *k* items of *a* sum to *w* (push formulation)."""
    _check_limit(k)
    _check_target(w)
    row = [0] + [INF] * w
    for value in a:
        following = list(row)
        for t, used in enumerate(row):
            if 0 <= t + value <= w:
                following[t + value] = min(following[t + value], used + 1)
        row = following
    return row[w] <= k


def subset_sum_unbounded_pull(w: int, a: Iterable[int]) -> bool:
    """Whether *w* is a sum of items of *a*, each usable any number of times."""
    _check_target(w)
    row = [True] + [False] * w
    for value in a:
        following: list[bool] = []
        for t in range(w + 1):
            prev = t - value
            following.append(row[t] or (0 <= prev < t and following[prev]))
        row = following
    return row[w]


def subset_sum_unbounded_push(w: int, a: Iterable[int]) -> bool:
    """Unbounded subset sum, pushing reachability forward within each row."""
    _check_target(w)
    row = [True] + [False] * w
    for value in a:
        following = list(row)
        for t in range(w + 1):
            if following[t] and value > 0 and t + value <= w:
                following[t + value] = True
        row = following
    return row[w]


def longest_common_subsequence(s: str, t: str) -> str:
    """A longest common subsequence of *s* and *t*."""
    previous = [""] * (len(t) + 1)
    for char_s in s:
        current = [""]
        for j, char_t in enumerate(t, 1):
            if char_s == char_t:
                current.append(previous[j - 1] + char_s)
            else:
                current.append(max(previous[j], current[j - 1], key=len))
        previous = current
    return previous[-1]


def aqua(m: int, a: Sequence[int]) -> float:
    """Largest sum of group averages when *a* is cut into *m* contiguous groups."""
    values = list(a)
    n = len(values)
    if m > n or m < 0:
        raise ValueError("0 <= M <= N required")
    prefix = [0, *accumulate(values)]
    dp = [[-float(INF)] * (m + 1) for _ in range(n + 1)]
    dp[0][0] = 0.0
    for end in range(1, n + 1):
        for groups in range(1, min(end, m) + 1):
            dp[end][groups] = max(
                dp[start][groups - 1] + (prefix[end] - prefix[start]) / (end - start)
                for start in range(groups - 1, end)
            )
    return dp[n][m]


def min_union_cost(slimes: Sequence[int]) -> int:
    """Least total cost of merging adjacent slimes into one; a merge costs the
    combined size."""
    values = list(slimes)
    n = len(values)
    if not values:
        raise ValueError("at least one slime required")
    prefix = [0, *accumulate(values)]
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length
            cost[i][j] = min(cost[i][k] + cost[k][j] for k in range(i + 1, j)) + (
                prefix[j] - prefix[i]
            )
    return cost[0][n]