"""All-pairs shortest paths with the Floyd-Warshall algorithm."""

from __future__ import annotations

from collections.abc import Sequence

INF = 99999

_HEADER = "The following matrix shows the shortest distances between every pair of vertices "


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the shortest distance between every pair of vertices.

    ``INF`` marks a missing edge; the input matrix is left unchanged.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("distance matrix must be square")
    dist = [list(row) for row in matrix]
    for k in range(size):
        for i in range(size):
            via_k = dist[i][k]
            if via_k == INF:
                continue
            for j in range(size):
                onward = dist[k][j]
                if onward != INF and dist[i][j] > via_k + onward:
                    dist[i][j] = via_k + onward
    return dist


def format_distances(matrix: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix as a header line and one tab-separated line per row."""
    lines = [_HEADER]
    for row in matrix:
        lines.append("".join(("INF" if d == INF else str(d)) + "\t " for d in row))
    return "\n".join(lines) + "\n"