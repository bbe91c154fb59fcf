"""Operations on singly linked lists: rotation, merging, palindromes, intersections."""

from __future__ import annotations

from dsakit.singly import ListNode, to_values


def rotate(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list left by ``k`` nodes and return the new head.

    The list is left as it is when ``k`` is 0 or not smaller than its length.
    """
    if k < 0:
        raise ValueError("rotation count cannot be negative")
    if k == 0 or head is None:
        return head
    kth = head
    for _ in range(k - 1):
        kth = kth.next
        if kth is None:
            return head
    if kth.next is None:
        return head
    last = kth
    while last.next is not None:
        last = last.next
    last.next = head
    new_head = kth.next
    kth.next = None
    return new_head


def merge_sorted_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one; on ties the node from ``first`` comes first."""
    if first is None:
        return second
    if second is None:
        return first
    if first.data <= second.data:
        head, first = first, first.next
    else:
        head, second = second, second.next
    tail = head
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return head


def is_palindrome(head: ListNode | None) -> bool:
    """Return True if the list reads the same both ways; an empty list does."""
    values = to_values(head)
    return values == values[::-1]


def intersection(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Return the first node shared by both lists, or None if they do not meet."""
    if first is None or second is None:
        return None
    a, b = first, second
    while a is not b:
        a = a.next if a is not None else second
        b = b.next if b is not None else first
    return a