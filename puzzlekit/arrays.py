"""Array puzzles: queue reconstruction and reverse-pair counting."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def reconstruct_queue(people: Sequence[Sequence[int]]) -> list[list[int]]:
    """Rebuild a queue from ``[height, taller_or_equal_in_front]`` pairs."""
    ordered = sorted(people, key=lambda person: (-person[0], person[1]))
    queue: list[list[int]] = []
    for height, ahead in ordered:
        queue.insert(ahead, [height, ahead])
    return queue


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``nums[i] > 2 * nums[j]``."""
    return _sort_and_count(list(nums))[1]


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    count = left_count + right_count
    boundary = 0
    for value in left:
        while boundary < len(right) and value > 2 * right[boundary]:
            boundary += 1
        count += boundary
    return list(heapq.merge(left, right)), count