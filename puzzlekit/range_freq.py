"""Frequency of a value within a subarray, answered by a segment tree."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


class RangeFreqQuery:
    """Answers how often a value occurs between two indices of an array."""

    def __init__(self, arr: Sequence[int]) -> None:
        values = list(arr)
        if not values:
            raise ValueError("array must not be empty")
        self._size = len(values)
        self._tree: list[Counter[int]] = [Counter() for _ in range(4 * self._size)]
        self._build(1, 0, self._size - 1, values)

    def _build(self, node: int, low: int, high: int, values: list[int]) -> None:
        if low == high:
            self._tree[node][values[low]] = 1
            return
        middle = (low + high) // 2
        self._build(2 * node, low, middle, values)
        self._build(2 * node + 1, middle + 1, high, values)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _count(self, node: int, low: int, high: int, left: int, right: int, value: int) -> int:
        if high < left or low > right:
            return 0
        if left <= low and high <= right:
            return self._tree[node][value]
        middle = (low + high) // 2
        return self._count(2 * node, low, middle, left, right, value) + self._count(
            2 * node + 1, middle + 1, high, left, right, value
        )

    def query(self, left: int, right: int, value: int) -> int:
        """Return how many times ``value`` occurs in ``arr[left:right + 1]``."""
        return self._count(1, 0, self._size - 1, left, right, value)