"""Exhaustive-search drills."""

from __future__ import annotations

from itertools import product

_DIGITS = "0123456789"


def _count_triples(k: int, n: int, bound: int) -> int:
    values = range(bound + 1)
    return sum(1 for x, y in product(values, values) if 0 <= n - x - y <= k)


def count_simple(k: int, n: int) -> int:
    """Count (x, y, z) in [0, k]^3 with x + y + z == n by trying every x, y."""
    return _count_triples(k, n, k)


def count_better(k: int, n: int) -> int:
    """Same count as count_simple, pruning the search range."""
    if k < 0 or n < 0:
        raise ValueError("argument must not be negative")
    if 3 * k < n:
        return 0
    return _count_triples(k, n, min(k, n))


def sum_bit(s: str, bit: int) -> int:
    """Sum the numbers formed by cutting *s* after position i where bit i is set."""
    if not s:
        raise ValueError("argument must not be empty")
    if any(char not in _DIGITS for char in s):
        raise ValueError("argument must be number")
    total = 0
    current = 0
    for i, char in enumerate(s[:-1]):
        current += int(char)
        if bit & (1 << i):
            total += current
            current = 0
        else:
            current *= 10
    return total + current + int(s[-1])


def sum_combi(s: str) -> int:
    """Sum of sum_bit over every way of placing '+' between the digits of *s*."""
    if not s:
        raise ValueError("argument must not be empty")
    return sum(sum_bit(s, bit) for bit in range(1 << (len(s) - 1)))