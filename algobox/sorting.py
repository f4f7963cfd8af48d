"""Comparison and distribution sorts over sequences of numbers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from itertools import accumulate, chain
from typing import TypeVar

T = TypeVar("T")


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new stably sorted list using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    # The left half takes the middle element, as with an inclusive midpoint.
    mid = (len(items) + 1) // 2
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    # heapq.merge prefers the earlier iterable on ties, which keeps it stable.
    return list(heapq.merge(left, right))


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a new sorted list using bubble sort."""
    items = list(values)
    n = len(items)
    for passes in range(n - 1):
        for j in range(n - passes - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a new sorted list using selection sort."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        min_pos = min(range(i, n), key=items.__getitem__)
        items[i], items[min_pos] = items[min_pos], items[i]
    return items


def _check_non_negative(items: list[int], name: str) -> None:
    if any(value < 0 for value in items):
        raise ValueError(f"{name} only handles non-negative integers")


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return a new stably sorted list of non-negative integers."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items, "counting_sort")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))
    output = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return a new sorted list of non-negative integers using LSD radix sort."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items, "radix_sort")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = list(chain.from_iterable(buckets))
        exp *= 10
    return items