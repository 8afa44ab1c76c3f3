"""Greedy drills: button pushing, pairings, scheduling and shopping."""

from __future__ import annotations

from collections.abc import Iterable

Pair = tuple[int, int]


def count_push(pair: Pair) -> int:
    """Smallest d >= 0 such that a + d equals n * b for some n >= 1."""
    a, b = pair
    if b <= 0:
        raise ValueError("b must be positive")
    n = max(1, -(-a // b))
    return n * b - a


def min_push(pairs: Iterable[Pair]) -> int:
    """Fewest pushes making every a_i a multiple of b_i, where pushing button i
    increments a_0..a_i."""
    total = 0
    for a, b in reversed(list(pairs)):
        total += count_push((a + total, b))
    return total


def max_pairing_numbers(a: Iterable[int], b: Iterable[int]) -> int:
    """Most pairs (x, y) with x from *a*, y from *b* and x < y, each used once."""
    smaller = sorted(a)
    used = 0
    for value in sorted(b):
        if used < len(smaller) and smaller[used] < value:
            used += 1
    return used


def max_pairing_points(red: Iterable[Pair], blue: Iterable[Pair]) -> int:
    """Most red/blue point pairs where the red point lies strictly below and to
    the left of the blue one, each point used once."""
    reds = sorted(red)
    blues = sorted(blue)
    used = [False] * len(reds)
    count = 0
    for bx, by in blues:
        best: int | None = None
        for i, (rx, ry) in enumerate(reds):
            if not used[i] and rx < bx and ry < by:
                if best is None or reds[best][1] < ry:
                    best = i
        if best is not None:
            used[best] = True
            count += 1
    return count


def can_done(tasks: Iterable[Pair]) -> bool:
    """Whether every (duration, deadline) task can be finished by its deadline."""
    now = 0
    for duration, deadline in sorted(tasks, key=lambda task: task[1]):
        now += duration
        if now > deadline:
            return False
    return True


def min_cost(shops: Iterable[Pair], m: int) -> int:
    """Cheapest price of buying exactly *m* items from (price, stock) shops.

    Raises ValueError when that many items cannot be bought.
    """
    remaining = m
    cost = 0
    if remaining > 0:
        for price, stock in sorted(shops):
            take = min(max(stock, 0), remaining)
            cost += price * take
            remaining -= take
            if remaining == 0:
                return cost
    raise ValueError("Cannot")