"""Rearranging singly linked lists: swaps, group reversal, removal and reordering."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.singly import ListNode


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _relink(nodes: list[ListNode]) -> ListNode | None:
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    if nodes:
        nodes[-1].next = None
        return nodes[0]
    return None


def swap_nodes(head: ListNode | None, i: int, j: int) -> ListNode | None:
    """Swap the nodes (not their values) at 0-based positions ``i`` and ``j``.

    Returns the new head. Lists of fewer than two nodes and equal positions
    are returned unchanged.
    """
    if i == j or head is None or head.next is None:
        return head
    nodes = list(_nodes(head))
    for index in (i, j):
        if not 0 <= index < len(nodes):
            raise IndexError(f"position {index} is outside 0..{len(nodes) - 1}")
    nodes[i], nodes[j] = nodes[j], nodes[i]
    return _relink(nodes)


def swap_pair_values(head: ListNode | None) -> ListNode | None:
    """Swap the values of each adjacent pair of nodes in place; return the head."""
    node = head
    while node is not None and node.next is not None:
        node.data, node.next.data = node.next.data, node.data
        node = node.next.next
    return head


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap each adjacent pair of nodes by relinking; return the new head."""
    dummy = ListNode(None, head)
    previous = dummy
    current = head
    while current is not None and current.next is not None:
        partner = current.next
        current.next = partner.next
        partner.next = current
        previous.next = partner
        previous = current
        current = current.next
    return dummy.next


def k_reverse(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the list ``k`` nodes at a time, the leftover tail too; return the head.

    A ``k`` of 0 or 1 leaves the list as it is.
    """
    if k < 0:
        raise ValueError("group size cannot be negative")
    size = max(k, 1)
    nodes = list(_nodes(head))
    reordered: list[ListNode] = []
    for start in range(0, len(nodes), size):
        reordered.extend(reversed(nodes[start : start + size]))
    return _relink(reordered)


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end (1 is the last); return the head."""
    nodes = list(_nodes(head))
    length = len(nodes)
    if not 1 <= n <= length:
        raise IndexError(f"position {n} from the end is outside 1..{length}")
    if n == length:
        return head.next
    before = nodes[length - n - 1]
    target = before.next
    before.next = target.next
    target.next = None
    return head


def nth_from_end(head: ListNode | None, n: int) -> Any:
    """Return the value ``n`` nodes before the last one; 0 gives the last value."""
    if n < 0:
        raise ValueError("distance cannot be negative")
    lead = head
    for steps in range(n):
        if lead is None:
            raise IndexError(f"n = {n} is larger than the number of elements = {steps}")
        lead = lead.next
    if lead is None:
        raise IndexError(f"n = {n} is not smaller than the number of elements = {n}")
    trail = head
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    return trail.data


def reorder(head: ListNode | None) -> ListNode | None:
    """Relink L0, L1, ..., Ln as L0, Ln, L1, Ln-1, ... in place; return the head."""
    nodes = list(_nodes(head))
    order: list[ListNode] = []
    low, high = 0, len(nodes) - 1
    while low <= high:
        order.append(nodes[low])
        if low != high:
            order.append(nodes[high])
        low += 1
        high -= 1
    return _relink(order)