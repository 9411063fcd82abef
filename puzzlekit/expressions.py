"""All results of an arithmetic expression under every parenthesisation."""

from __future__ import annotations

import operator
import string
from functools import lru_cache

_OPERATIONS = {"+": operator.add, "-": operator.sub, "*": operator.mul}


def diff_ways_to_compute(expression: str) -> list[int]:
    """Return the value of ``expression`` for every way of grouping it.

    Any non-digit character splits the expression; characters other than
    ``+``, ``-`` and ``*`` combine their operands to 0.
    """
    return list(_compute(expression))


@lru_cache(maxsize=None)
def _compute(expression: str) -> tuple[int, ...]:
    results: list[int] = []
    is_number = True
    for position, symbol in enumerate(expression):
        if symbol in string.digits:
            continue
        is_number = False
        operation = _OPERATIONS.get(symbol)
        left = _compute(expression[:position])
        right = _compute(expression[position + 1:])
        results.extend(
            operation(x, y) if operation is not None else 0
            for x in left
            for y in right
        )
    if is_number:
        if not expression:
            raise ValueError("missing operand in expression")
        results.append(int(expression))
    return tuple(results)