"""Binary-search drills: ranking, counting triples, darts, spacing, products, roots."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import product

EPS = 1e-6

Trio = tuple[Sequence[int], Sequence[int], Sequence[int]]


def ranking(a: Sequence[int]) -> list[int]:
    """For every element, how many elements of *a* are strictly smaller."""
    ordered = sorted(a)
    return [bisect_left(ordered, value) for value in a]


def festival_simple(z: Trio) -> int:
    """Count triples a < b < c with a, b, c taken from the three lists, in O(N^3)."""
    first, second, third = z
    return sum(
        1
        for a in first
        for b in second
        if a < b
        for c in third
        if b < c
    )


def festival_binary(z: Trio) -> int:
    """Same count as festival_simple, using sorting and binary search."""
    first, second, third = (sorted(values) for values in z)
    return sum(
        bisect_left(first, b) * (len(third) - bisect_right(third, b))
        for b in second
    )


def _no_solution() -> ValueError:
    return ValueError("Solution does not exist")


def darts_simple(a: Sequence[int], m: int) -> int:
    """Largest sum of four (repeatable) values from *a* not exceeding *m*, in O(N^4)."""
    sums = [sum(choice) for choice in product(a, repeat=4) if sum(choice) <= m]
    if not sums:
        raise _no_solution()
    return max(sums)


def darts_binary(a: Sequence[int], m: int) -> int:
    """Same result as darts_simple in O(N^2 log N)."""
    if not a or 4 * min(a) > m:
        raise _no_solution()
    pair_sums = sorted(x + y for x, y in product(a, repeat=2))
    best: int | None = None
    for k in pair_sums:
        index = bisect_right(pair_sums, m - k)
        if index == 0:
            continue
        candidate = k + pair_sums[index - 1]
        if best is None or candidate > best:
            best = candidate
    if best is None:
        raise _no_solution()
    return best


def count_spaced(a: Sequence[int], x: int) -> int:
    """Greedily pick sorted positions at least *x* apart; return how many were picked."""
    if not a:
        raise IndexError("positions must not be empty")
    previous = a[0]
    count = 1
    for position in a:
        if position - previous >= x:
            count += 1
            previous = position
    return count


def cows(a: Sequence[int], m: int) -> int:
    """Largest minimum distance achievable when choosing *m* of the sorted positions *a*."""
    if m < 2 or m > len(a):
        raise ValueError("2 <= M <= N required")
    left = 0
    right = a[-1] + 1
    while right - left > 1:
        middle = (left + right) // 2
        if count_spaced(a, middle) >= m:
            left = middle
        else:
            right = middle
    return left


def count_products_at_most(a: Iterable[int], b: Sequence[int], x: int) -> int:
    """Number of pairs with a[i] * b[j] <= x; *b* sorted, all values positive."""
    return sum(bisect_right(b, x // factor) for factor in a)


def _check_rank(k: int, total: int) -> None:
    if not 1 <= k <= total:
        raise IndexError(f"rank out of range: {k}")


def product_th_simple(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """The *k*-th smallest product a[i] * b[j] (1-based), by sorting all products."""
    products = sorted(x * y for x, y in product(a, b))
    _check_rank(k, len(products))
    return products[k - 1]


def product_th_binary(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """The *k*-th smallest product a[i] * b[j], by binary search on the answer."""
    first = sorted(a)
    second = sorted(b)
    if not first or not second:
        raise IndexError("a and b must not be empty")
    if first[0] <= 0 or second[0] <= 0:
        raise ValueError("a and b must be positive numbers")
    left = 0
    right = first[-1] * second[-1]
    while right - left > 1:
        middle = (left + right) // 2
        if count_products_at_most(first, second, middle) >= k:
            right = middle
        else:
            left = middle
    return right


def _equation(t: float, constants: tuple[int, int, int]) -> float:
    a, b, c = constants
    return a * t + b * math.sin(c * t * math.pi) - 100


def bisection(
    constants: tuple[int, int, int], interval: tuple[float, float]
) -> float:
    """A root of A*t + B*sin(C*t*pi) = 100 inside *interval*, to within EPS."""
    left, right = interval
    if left >= right:
        raise ValueError("left must be less than right")
    if _equation(left, constants) >= 0 or _equation(right, constants) <= 0:
        raise ValueError("func(left) < 0 and func(right) > 0 required")
    while right - left > EPS:
        middle = (left + right) / 2
        if _equation(middle, constants) >= 0:
            right = middle
        else:
            left = middle
    return right