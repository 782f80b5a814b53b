"""Array drills: selection, shifting, partitioning and pair searching."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import pairwise

_NO_SECOND_VALUE = -1


def diagonal_difference(matrix: Sequence[Sequence[int]]) -> int:
    """Return the absolute difference between the two diagonal sums."""
    size = len(matrix)
    primary = sum(row[i] for i, row in enumerate(matrix))
    secondary = sum(row[size - 1 - i] for i, row in enumerate(matrix))
    return abs(primary - secondary)


def _check_selection(values: Sequence[int], k: int) -> None:
    if not values:
        raise ValueError("cannot select from an empty sequence")
    if k < 1:
        raise ValueError("k must be at least 1")


def kth_largest(values: Sequence[int], k: int) -> int:
    """Return the k-th largest value; the smallest when k exceeds the length."""
    _check_selection(values, k)
    return heapq.nlargest(k, values)[-1]


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the k-th smallest value; the largest when k exceeds the length."""
    _check_selection(values, k)
    return heapq.nsmallest(k, values)[-1]


def left_shift(values: Sequence[int]) -> list[int]:
    """Return the values rotated one place to the left."""
    return [*values[1:], *values[:1]]


def move_zeros(values: Sequence[int]) -> list[int]:
    """Return the values with every zero moved to the end, order kept."""
    non_zero = [v for v in values if v != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def missing_values(values: Sequence[int]) -> list[int]:
    """Return the integers skipped between neighbours of a sorted sequence."""
    return [n for low, high in pairwise(values) for n in range(low + 1, high)]


def _second_from_top(values: Sequence[int]) -> int | None:
    first: int | None = None
    second: int | None = None
    for num in values:
        if first is None or num > first:
            if first is not None:
                second = first
            first = num
        elif num < first and (second is None or num > second):
            second = num
    return second


def second_highest(values: Sequence[int]) -> int | None:
    """Return the second highest distinct value, or None if there is none."""
    return _second_from_top(values)


def second_largest(values: Sequence[int]) -> int:
    """Return the second largest distinct value, or -1 if there is none."""
    result = _second_from_top(values)
    return _NO_SECOND_VALUE if result is None else result


def second_smallest(values: Sequence[int]) -> int:
    """Return the second smallest distinct value, or -1 if there is none."""
    result = _second_from_top([-v for v in values])
    return _NO_SECOND_VALUE if result is None else -result


def shift_larger_to_left(values: Sequence[int], threshold: int) -> list[int]:
    """Return values above ``threshold`` first, then the rest, each in order."""
    larger = [v for v in values if v > threshold]
    smaller = [v for v in values if v <= threshold]
    return larger + smaller


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell; 0 if none."""
    best = 0
    lowest: int | None = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices (i, j), i < j, of two values summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return seen[complement], index
        seen[num] = index
    return None