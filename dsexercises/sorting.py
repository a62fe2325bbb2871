"""Comparison and counting sorts, randomized selection and odd/even partition."""

from __future__ import annotations

import random
from collections.abc import Iterable


def _sift_down(items: list, index: int, size: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable) -> list:
    """Return the values in ascending order using a max-heap."""
    items = list(values)
    size = len(items)
    for index in reversed(range(size // 2)):
        _sift_down(items, index, size)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative integers in ascending order by counting them."""
    items = list(values)
    if not items:
        return []
    if any(not isinstance(v, int) or v < 0 for v in items):
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _randomized_partition(items: list, low: int, high: int, rng: random.Random) -> int:
    pivot_index = rng.randint(low, high)
    items[high], items[pivot_index] = items[pivot_index], items[high]
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def randomized_select(values: Iterable, rank: int, rng: random.Random | None = None):
    """Return the ``rank``-th smallest value (1 is the smallest)."""
    items = list(values)
    if not 1 <= rank <= len(items):
        raise ValueError(f"rank {rank} is outside 1..{len(items)}")
    rng = rng or random.Random()
    low, high = 0, len(items) - 1
    while True:
        if low == high:
            return items[low]
        split = _randomized_partition(items, low, high, rng)
        below = split - low + 1
        if rank == below:
            return items[split]
        if rank < below:
            high = split - 1
        else:
            low = split + 1
            rank -= below


def odd_first(values: Iterable[int]) -> list[int]:
    """Swap from both ends so every odd number comes before every even one."""
    items = list(values)
    i, j = 0, len(items) - 1
    while i < j:
        if items[i] % 2:
            i += 1
        elif items[j] % 2 == 0:
            j -= 1
        else:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return items