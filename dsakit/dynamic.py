"""Dynamic-programming and greedy optimisation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def matrix_chain_order(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a matrix chain.

    Matrix i has shape ``dimensions[i - 1] x dimensions[i]``.
    """
    n = len(dimensions)
    if n < 2:
        raise ValueError("at least two dimensions are needed to describe a matrix")
    cost = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dimensions[i - 1] * dimensions[k] * dimensions[j]
                for k in range(i, j)
            )
    return cost[1][n - 1]


def minimal_badness(preferred_ranks: Iterable[int]) -> int:
    """Return the least total |actual - preferred| rank distance over all ranklists.

    Teams are greedily given the nearest free rank in order of preference.
    """
    return sum(
        abs(actual - preferred)
        for actual, preferred in enumerate(sorted(preferred_ranks), start=1)
    )