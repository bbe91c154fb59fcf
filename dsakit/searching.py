"""Searching in sequences: pair sums, linear and ternary search, subset sums."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def has_pair_with_sum(values: Sequence[int], target: int) -> bool:
    """Return True if two distinct elements add up to ``target``."""
    return any(a + b == target for a, b in combinations(values, 2))


def find_positions(values: Sequence[float], element: float) -> list[int]:
    """Return the 1-based positions at which ``element`` occurs.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("cannot search an empty sequence")
    return [position for position, value in enumerate(values, start=1) if value == element]


def ternary_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        third = (high - low) // 3
        m1, m2 = low + third, high - third
        if values[m1] == key:
            return m1
        if values[m2] == key:
            return m2
        if key < values[m1]:
            high = m1 - 1
        elif key > values[m2]:
            low = m2 + 1
        else:
            low, high = m1 + 1, m2 - 1
    return None


def is_subset_sum(values: Sequence[int], total: int) -> bool:
    """Return True if some subset of ``values`` adds up to ``total``."""

    def search(count: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if count == 0:
            return False
        last = values[count - 1]
        if last > remaining:
            return search(count - 1, remaining)
        return search(count - 1, remaining) or search(count - 1, remaining - last)

    return search(len(values), total)