"""Binary trees: level-order construction, search-tree operations and shape checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values given in level order, root first.

    After the root, each node takes two values in turn, its left and right child;
    None marks a missing child. Running out of values leaves the rest empty.
    """
    items = iter(values)
    try:
        first = next(items)
    except StopIteration:
        return None
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def search(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Find ``key`` in a search tree recursively; return its node or None."""
    if root is None or root.data == key:
        return root
    if root.data > key:
        return search(root.left, key)
    return search(root.right, key)


def search_iterative(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Find ``key`` in a search tree with a loop; return its node or None."""
    node = root
    while node is not None:
        if node.data == key:
            return node
        node = node.left if node.data > key else node.right
    return None


def insert(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Add ``key`` to a search tree and return its new node.

    Returns None if the key is already present. With an empty tree the new
    node is returned and serves as the root.
    """
    node = TreeNode(key)
    if root is None:
        return node
    parent = root
    while True:
        if parent.data == key:
            return None
        if parent.data > key:
            if parent.left is None:
                parent.left = node
                return node
            parent = parent.left
        else:
            if parent.right is None:
                parent.right = node
                return node
            parent = parent.right


def height(root: TreeNode | None) -> int:
    """Return the number of levels in the tree; 0 when empty."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the node values level by level, left to right."""
    if root is None:
        return []
    order = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return order


def _mirror(first: TreeNode | None, second: TreeNode | None) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None or first.data != second.data:
        return False
    return _mirror(first.left, second.right) and _mirror(first.right, second.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True if the tree is a mirror image of itself."""
    return _mirror(root, root)