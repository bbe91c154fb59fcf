"""Recursive classics: combinatorics, Josephus, digit counting, series and Hanoi."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from itertools import combinations as _combinations
from itertools import product

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def combination(n: float, r: float) -> float:
    """Return nCr computed as n/r * (n-1)/(r-1) * ... in floating point."""
    result = 1.0
    while r > 0:
        result *= n / r
        n -= 1
        r -= 1
    return result


def josephus(n: int, k: int) -> int:
    """Return the 1-based surviving position among ``n`` people counting by ``k``."""
    if n < 1:
        raise ValueError("the circle needs at least one person")
    position = 1
    for size in range(2, n + 1):
        position = (position + k - 1) % size + 1
    return position


def count_digit_one(n: int) -> int:
    """Return how many times the digit 1 appears in all integers from 1 to ``n``."""
    if n <= 0:
        return 0
    count = 0
    factor = 1
    while factor <= n:
        higher = n // (factor * 10)
        current = (n // factor) % 10
        lower = n % factor
        if current == 0:
            count += higher * factor
        elif current == 1:
            count += higher * factor + lower + 1
        else:
            count += (higher + 1) * factor
        factor *= 10
    return count


def combinations(values: Sequence, r: int) -> list[tuple]:
    """Return every ``r``-element selection of ``values`` in index order."""
    return list(_combinations(values, r))


def factorial(n: int) -> int:
    """Return n!."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("Fibonacci numbers are indexed from zero")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    return [fibonacci(index) for index in range(max(count, 0))]


def keypad_combinations(digits: Iterable[int | str]) -> list[str]:
    """Return every word a phone keypad can spell for ``digits``, in keypad order.

    Digits 0 and 1 carry no letters, so any sequence holding them spells nothing.
    """
    letters = []
    for digit in digits:
        value = int(digit)
        if not 0 <= value <= 9:
            raise ValueError(f"not a keypad digit: {digit!r}")
        letters.append(_KEYPAD[value])
    return ["".join(word) for word in product(*letters)]


def taylor_exp(x: float, n: int) -> float:
    """Return the sum of the first ``n + 1`` terms of the Taylor series of e**x."""
    if n < 0:
        raise ValueError("the number of terms cannot be negative")
    total = 1.0
    power = 1.0
    fact = 1.0
    for index in range(1, n + 1):
        power *= x
        fact *= index
        total += power / fact
    return total


def hanoi_moves(
    n: int,
    source: Hashable = "A",
    helper: Hashable = "B",
    destination: Hashable = "C",
) -> list[tuple[int, Hashable, Hashable]]:
    """Return the moves (disk, from_rod, to_rod) that shift ``n`` disks to ``destination``."""
    if n < 0:
        raise ValueError("the number of disks cannot be negative")
    moves: list[tuple[int, Hashable, Hashable]] = []

    def move(count: int, src: Hashable, via: Hashable, dst: Hashable) -> None:
        if count == 0:
            return
        move(count - 1, src, dst, via)
        moves.append((count, src, dst))
        move(count - 1, via, src, dst)

    move(n, source, helper, destination)
    return moves