"""Maximum bipartite matching with the Hopcroft-Karp algorithm."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from collections.abc import Sequence

_NIL = 0


class BipartiteGraph:
    """A bipartite graph with left vertices 1..m and right vertices 1..n."""

    def __init__(self, m: int, n: int) -> None:
        if m < 0 or n < 0:
            raise ValueError("vertex counts cannot be negative")
        self.m = m
        self.n = n
        self._adjacency: list[list[int]] = [[] for _ in range(m + 1)]

    def add_edge(self, u: int, v: int) -> None:
        """Connect left vertex ``u`` to right vertex ``v``."""
        if not 1 <= u <= self.m:
            raise ValueError(f"left vertex {u} is outside 1..{self.m}")
        if not 1 <= v <= self.n:
            raise ValueError(f"right vertex {v} is outside 1..{self.n}")
        self._adjacency[u].append(v)

    def max_matching(self) -> int:
        """Return the size of a maximum matching."""
        adjacency = self._adjacency
        pair_u = [_NIL] * (self.m + 1)
        pair_v = [_NIL] * (self.n + 1)
        dist = [math.inf] * (self.m + 1)

        def layer() -> bool:
            queue = deque()
            for u in range(1, self.m + 1):
                if pair_u[u] == _NIL:
                    dist[u] = 0
                    queue.append(u)
                else:
                    dist[u] = math.inf
            dist[_NIL] = math.inf
            while queue:
                u = queue.popleft()
                if dist[u] < dist[_NIL]:
                    for v in adjacency[u]:
                        if dist[pair_v[v]] == math.inf:
                            dist[pair_v[v]] = dist[u] + 1
                            queue.append(pair_v[v])
            return dist[_NIL] != math.inf

        def augment(u: int) -> bool:
            if u == _NIL:
                return True
            for v in adjacency[u]:
                if dist[pair_v[v]] == dist[u] + 1 and augment(pair_v[v]):
                    pair_v[v] = u
                    pair_u[u] = v
                    return True
            dist[u] = math.inf
            return False

        result = 0
        while layer():
            for u in range(1, self.m + 1):
                if pair_u[u] == _NIL and augment(u):
                    result += 1
        return result


def _read_graph(text: str) -> BipartiteGraph:
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError("input must consist of integers") from exc
    if len(numbers) < 3:
        raise ValueError("expected left count, right count and edge count")
    m, n, edges = numbers[:3]
    if edges < 0 or len(numbers) < 3 + 2 * edges:
        raise ValueError(f"expected {edges} edges")
    graph = BipartiteGraph(m, n)
    pairs = numbers[3 : 3 + 2 * edges]
    for u, v in zip(pairs[::2], pairs[1::2]):
        graph.add_edge(u, v)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Read a bipartite graph and print the size of its maximum matching."""
    parser = argparse.ArgumentParser(
        prog="hopcroft-karp",
        description="Read 'm n e' followed by e edges 'u v' and print the maximum matching size.",
    )
    parser.add_argument("input", nargs="?", help="file to read instead of standard input")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    try:
        graph = _read_graph(text)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Maximum matching is {graph.max_matching()}")
    return 0