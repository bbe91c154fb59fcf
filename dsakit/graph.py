"""Graph traversals, topological order, Eulerian checks and island counting."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside 0..{count - 1}")


def _check_adjacency(adjacency: Sequence[Sequence[int]]) -> None:
    count = len(adjacency)
    for neighbours in adjacency:
        for vertex in neighbours:
            _check_vertex(vertex, count)


def _bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


class Graph:
    """A directed graph on vertices 0..n-1 stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count cannot be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from ``v`` to ``w``."""
        _check_vertex(v, len(self._adjacency))
        _check_vertex(w, len(self._adjacency))
        self._adjacency[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, len(self._adjacency))
        return _bfs(self._adjacency, start)


def bfs_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the breadth-first order from vertex 0 of a directed adjacency list."""
    if not adjacency:
        return []
    _check_adjacency(adjacency)
    return _bfs(adjacency, 0)


def dfs_order(adjacency: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return the depth-first (pre-order) visit order from ``start``."""
    _check_adjacency(adjacency)
    _check_vertex(start, len(adjacency))
    order = [start]
    visited = {start}
    stack = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def topological_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order by Kahn's algorithm.

    Vertices on or behind a cycle never reach in-degree zero and are left out.
    """
    _check_adjacency(adjacency)
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for vertex in neighbours:
            indegree[vertex] += 1
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def _reachable(matrix: Sequence[Sequence[int]], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for v, linked in enumerate(matrix[u]):
            if linked and v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def is_connected(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if every vertex reaches every other along nonzero entries."""
    size = _check_square(matrix)
    return all(len(_reachable(matrix, start)) == size for start in range(size))


def has_eulerian_path(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if the connected graph has at most two vertices of odd degree."""
    if not is_connected(matrix):
        return False
    odd = sum(1 for row in matrix if sum(1 for linked in row if linked) % 2)
    return odd <= 2


def count_islands(grid: Sequence[Sequence[object]]) -> int:
    """Count 4-connected groups of land cells ("1") in a grid; the grid is not changed."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if str(cell) == "1"
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for cell in ((r + 1, c), (r - 1, c), (r, c - 1), (r, c + 1)):
                if cell in land:
                    land.remove(cell)
                    stack.append(cell)
    return islands