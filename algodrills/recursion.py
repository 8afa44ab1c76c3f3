"""Recursion and memoisation drills."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import permutations


def tribo(n: int) -> int:
    """The n-th tribonacci number (0, 0, 1, 1, 2, ...), computed naively."""
    if n < 0:
        raise ValueError("argument must not be negative")
    if n < 2:
        return 0
    if n == 2:
        return 1
    return tribo(n - 1) + tribo(n - 2) + tribo(n - 3)


def tribo_memo(n: int) -> list[int]:
    """The tribonacci numbers from index 0 up to and including *n*."""
    if n < 0:
        raise ValueError("argument must not be negative")
    values = [0, 0, 1][: n + 1]
    while len(values) <= n:
        values.append(sum(values[-3:]))
    return values


def _is_753(number: int) -> bool:
    digits = str(number)
    return set(digits) == {"3", "5", "7"}


def count753_recursive(k: int) -> int:
    """Count numbers up to *k* made only of the digits 3, 5, 7, each used at least once."""
    if k < 0:
        raise ValueError("argument must not be negative")
    return sum(1 for number in range(357, k + 1) if _is_753(number))


def count753_permutation(k: int) -> int:
    """Count the three-digit permutations of 3, 5, 7 that do not exceed *k*."""
    if k < 0:
        raise ValueError("argument must not be negative")
    candidates = {int("".join(p)) for p in permutations("357")}
    return sum(1 for c in candidates if c <= k)


def partial_sum_exists(w: int, a: Sequence[int]) -> bool:
    """Whether some subset of *a* sums to exactly *w*."""
    values = tuple(a)

    @lru_cache(maxsize=None)
    def reachable(i: int, target: int) -> bool:
        if target < 0:
            return False
        if i == 0:
            return target == 0
        return reachable(i - 1, target) or reachable(i - 1, target - values[i - 1])

    return reachable(len(values), w)