"""Small array and number puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, combinations


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation profile can hold."""
    if len(heights) <= 2:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of two values summing to ``target``.

    The values are scanned in sorted order from both ends; when no pair is
    found the result is ``[0, 0]``.
    """
    pairs = sorted((value, index) for index, value in enumerate(nums))
    i, j = 0, len(pairs) - 1
    while i < j:
        total = pairs[i][0] + pairs[j][0]
        if total == target:
            return [pairs[i][1], pairs[j][1]]
        if total < target:
            i += 1
        if pairs[i][0] + pairs[j][0] > target:
            j -= 1
    return [0, 0]


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct subset, each sorted, in lexicographic order."""
    items = sorted(nums)
    subsets = {
        combo
        for size in range(len(items) + 1)
        for combo in combinations(items, size)
    }
    return [list(subset) for subset in sorted(subsets)]


def number_complement(n: int) -> int:
    """Flip every bit of ``n`` up to its highest set bit."""
    mask = 0
    while mask < n:
        mask = (mask << 1) | 1
    return ~n & mask


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result