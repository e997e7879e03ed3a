"""In-place comparison sorts used by the benchmark.

Every function sorts a mutable sequence of mutually comparable items
(numbers or strings) in ascending order, in place, and returns None.
"""

from __future__ import annotations

from typing import Any, MutableSequence

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "shell_sort",
]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort by moving the smallest remaining item to the front each pass."""
    n = len(items)
    for i in range(n - 1):
        min_idx = min(range(i, n), key=items.__getitem__)
        items[i], items[min_idx] = items[min_idx], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort by inserting each item into the sorted prefix before it."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def _merge(items: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    left = items[lo:mid]
    right = items[mid:hi]
    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            items[k] = left[i]
            i += 1
        else:
            items[k] = right[j]
            j += 1
        k += 1
    for value in left[i:]:
        items[k] = value
        k += 1
    for value in right[j:]:
        items[k] = value
        k += 1


def _merge_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo > 1:
        mid = lo + (hi - 1 - lo) // 2 + 1
        _merge_sort(items, lo, mid)
        _merge_sort(items, mid, hi)
        _merge(items, lo, mid, hi)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Stable top-down merge sort."""
    _merge_sort(items, 0, len(items))


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _quick_sort(items: MutableSequence[Any], low: int, high: int) -> None:
    # Recurse into the smaller side and loop over the larger to bound depth.
    while low < high:
        pivot_index = _partition(items, low, high)
        if pivot_index - low < high - pivot_index:
            _quick_sort(items, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            _quick_sort(items, pivot_index + 1, high)
            high = pivot_index - 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """Quicksort with the last element of each range as pivot."""
    _quick_sort(items, 0, len(items) - 1)


def shell_sort(items: MutableSequence[Any]) -> None:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = items[i]
            j = i
            while j >= gap and items[j - gap] > temp:
                items[j] = items[j - gap]
                j -= gap
            items[j] = temp
        gap //= 2