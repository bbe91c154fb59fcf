"""A self-balancing AVL search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node; ``height`` counts a leaf as 1."""

    key: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_ll(p: AVLNode) -> AVLNode:
    pl = p.left
    p.left = pl.right
    pl.right = p
    _update(p)
    _update(pl)
    return pl


def _rotate_rr(p: AVLNode) -> AVLNode:
    pr = p.right
    p.right = pr.left
    pr.left = p
    _update(p)
    _update(pr)
    return pr


def _rotate_lr(p: AVLNode) -> AVLNode:
    pl = p.left
    plr = pl.right
    pl.right = plr.left
    p.left = plr.right
    plr.left = pl
    plr.right = p
    _update(pl)
    _update(p)
    _update(plr)
    return plr


def _rotate_rl(p: AVLNode) -> AVLNode:
    pr = p.right
    prl = pr.left
    pr.left = prl.right
    p.right = prl.left
    prl.right = pr
    prl.left = p
    _update(pr)
    _update(p)
    _update(prl)
    return prl


def _insert(node: AVLNode | None, key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    _update(node)
    factor = _balance(node)
    if factor == 2 and _balance(node.left) == 1:
        return _rotate_ll(node)
    if factor == 2 and _balance(node.left) == -1:
        return _rotate_lr(node)
    if factor == -2 and _balance(node.right) == -1:
        return _rotate_rr(node)
    if factor == -2 and _balance(node.right) == 1:
        return _rotate_rl(node)
    return node


class AVLTree:
    """An AVL tree; inserting a key that is already present changes nothing."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: AVLNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key`` and rebalance the tree."""
        self.root = _insert(self.root, key)

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    @property
    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)