"""Stack-based puzzles: reverse Polish evaluation and bracket matching."""

from __future__ import annotations

import math


def _divide(b: float, a: float) -> float:
    if a == 0:
        if b == 0 or math.isnan(b):
            return math.nan
        return math.copysign(math.inf, b) * math.copysign(1.0, a)
    return b / a


_OPERATORS = {
    "+": lambda b, a: b + a,
    "-": lambda b, a: b - a,
    "*": lambda b, a: b * a,
    "/": _divide,
}


def polish(expr: str) -> float:
    """Evaluate a reverse Polish expression of single digits and + - * /."""
    stack: list[float] = []
    for char in expr:
        if char in "0123456789":
            stack.append(float(char))
            continue
        if not stack:
            raise ValueError("No operand exist")
        a = stack.pop()
        if not stack:
            raise ValueError("One operand only exist")
        b = stack.pop()
        try:
            operator = _OPERATORS[char]
        except KeyError:
            raise ValueError("Argument must be number or operator") from None
        stack.append(operator(b, a))
    if len(stack) != 1:
        raise ValueError("Invalid expression")
    return stack[0]


def pairing_paren(parens: str) -> dict[int, int]:
    """Map each '(' index to the index of its matching ')', ordered by '('."""
    result: dict[int, int] = {}
    open_indices: list[int] = []
    for index, char in enumerate(parens):
        if char == "(":
            open_indices.append(index)
        elif char == ")":
            if not open_indices:
                raise ValueError("Missing left paren to pair")
            result[open_indices.pop()] = index
        else:
            raise ValueError("Something that isn't paren included")
    if open_indices:
        raise ValueError("Missing right paren to pair")
    return dict(sorted(result.items()))