"""Huffman tree construction and prefix-code assignment."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from itertools import count


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry no symbol."""

    freq: int
    symbol: Hashable | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(
    frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]],
) -> HuffmanNode:
    """Build a Huffman tree, always joining the two lightest nodes first."""
    pairs = frequencies.items() if isinstance(frequencies, Mapping) else frequencies
    heap = []
    for order, (symbol, freq) in enumerate(pairs):
        if freq < 0:
            raise ValueError(f"negative frequency for {symbol!r}")
        heap.append((freq, order, HuffmanNode(freq, symbol)))
    if not heap:
        raise ValueError("at least one symbol is needed")
    heapq.heapify(heap)
    tiebreak = count(len(heap))
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(tiebreak), HuffmanNode(total, None, left, right)))
    return heap[0][2]


def _walk(node: HuffmanNode, prefix: str) -> Iterator[tuple[Hashable, str]]:
    if node.is_leaf:
        yield node.symbol, prefix
        return
    yield from _walk(node.left, prefix + "0")
    yield from _walk(node.right, prefix + "1")


def huffman_codes(
    frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]],
) -> dict[Hashable, str]:
    """Return each symbol's code, in pre-order of the tree (left is 0, right is 1)."""
    return dict(_walk(build_tree(frequencies), ""))