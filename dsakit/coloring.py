"""Sequential graph colouring with at most n - 1 colours."""

from __future__ import annotations

from collections.abc import Iterable


def color_graph(vertex_count: int, edges: Iterable[tuple[int, int]]) -> dict[int, int]:
    """Colour vertices 1..n in turn with the lowest colour (1..n-1) free of conflicts.

    Returns a mapping from vertex to colour. When a vertex cannot be coloured it
    keeps colour 0 and colouring stops, so it and every later vertex stay at 0.
    """
    if vertex_count < 0:
        raise ValueError("vertex count cannot be negative")
    neighbours: dict[int, set[int]] = {v: set() for v in range(1, vertex_count + 1)}
    for a, b in edges:
        for v in (a, b):
            if v not in neighbours:
                raise ValueError(f"vertex {v} is outside 1..{vertex_count}")
        neighbours[a].add(b)
        neighbours[b].add(a)

    colors = dict.fromkeys(neighbours, 0)
    for k in range(1, vertex_count + 1):
        while True:
            colors[k] = (colors[k] + 1) % vertex_count
            if colors[k] == 0:
                break
            if all(colors[j] != colors[k] for j in neighbours[k]):
                break
        if colors[k] == 0:
            break
    return colors