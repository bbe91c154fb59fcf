"""Loop detection in singly linked lists."""

from __future__ import annotations

from dsakit.singly import ListNode


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` ever revisits a node.

    Uses Floyd's tortoise-and-hare walk, so it needs no extra memory.
    """
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False