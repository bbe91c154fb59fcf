"""Classic comparison and distribution sorts, plus merging of sorted runs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def _lomuto_partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable) -> list:
    """Return a sorted copy using quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _lomuto_partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def _middle_pivot_partition(items: list, low: int, high: int) -> int:
    middle = (low + high) // 2
    items[middle], items[high] = items[high], items[middle]
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[high] = items[boundary]
    items[boundary] = pivot
    return boundary


def _middle_pivot_sort(items: list, low: int, high: int) -> None:
    # Recurse on the smaller side and loop on the larger to bound the depth.
    while low < high:
        split = _middle_pivot_partition(items, low, high)
        if split - low < high - split:
            _middle_pivot_sort(items, low, split - 1)
            low = split + 1
        else:
            _middle_pivot_sort(items, split + 1, high)
            high = split - 1


def quick_sort_middle_pivot(values: Iterable) -> list:
    """Return a sorted copy using quicksort with the middle element as pivot."""
    items = list(values)
    _middle_pivot_sort(items, 0, len(items) - 1)
    return items


def _counting_pass(items: list[int], exp: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for item in items:
        buckets[(item // exp) % 10].append(item)
    return [item for bucket in buckets for item in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers using LSD radix sort."""
    items = list(values)
    if not items:
        return items
    if any(item < 0 for item in items):
        raise ValueError("radix sort supports only non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _counting_pass(items, exp)
        exp *= 10
    return items


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Return a sorted copy using heapsort on a max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable) -> list:
    """Return a sorted copy using insertion sort."""
    items: list = []
    for value in values:
        position = len(items)
        while position > 0 and items[position - 1] > value:
            position -= 1
        items.insert(position, value)
    return items


def merge_sorted(first: Sequence, second: Sequence) -> list:
    """Merge two ascending sequences into one ascending list.

    On equal elements the one from ``second`` is taken first.
    """
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Return a sorted copy using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return merge_sorted(merge_sort(items[:middle]), merge_sort(items[middle:]))


def bubble_sort(values: Iterable) -> list:
    """Return a sorted copy using bubble sort."""
    items = list(values)
    for end in range(len(items), 1, -1):
        for i in range(end - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable) -> list:
    """Return a sorted copy using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_k_sorted(arrays: Sequence[Sequence[Any]]) -> list:
    """Merge any number of ascending sequences by pairwise divide and conquer."""
    if not arrays:
        return []
    if len(arrays) == 1:
        return list(arrays[0])
    if len(arrays) == 2:
        return merge_sorted(arrays[0], arrays[1])
    middle = (len(arrays) + 1) // 2
    return merge_sorted(merge_k_sorted(arrays[:middle]), merge_k_sorted(arrays[middle:]))