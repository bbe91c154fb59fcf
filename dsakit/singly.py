"""Singly linked lists: building, insertion, searching, summing and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of the list from the head onwards."""
    return [node.data for node in _nodes(head)]


def push(head: ListNode | None, value: Any) -> ListNode:
    """Put ``value`` in front of the list and return the new head."""
    return ListNode(value, head)


def append(head: ListNode | None, value: Any) -> ListNode:
    """Add ``value`` at the end of the list and return the head."""
    node = ListNode(value)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def insert_sorted(head: ListNode | None, value: Any) -> ListNode:
    """Insert ``value`` into an ascending list, before any equal values; return the head."""
    node = ListNode(value)
    if head is None or head.data >= value:
        node.next = head
        return node
    current = head
    while current.next is not None and current.next.data < value:
        current = current.next
    node.next = current.next
    current.next = node
    return head


def reversed_values(head: ListNode | None) -> list[Any]:
    """Return the values of the list from last to first, leaving the list unchanged."""
    stack = to_values(head)
    stack.reverse()
    return stack


def find_position(head: ListNode | None, value: Any) -> int | None:
    """Return the 1-based position of the first node holding ``value``, or None."""
    for position, node in enumerate(_nodes(head), start=1):
        if node.data == value:
            return position
    return None


def node_sum(head: ListNode | None) -> Any:
    """Return the sum of the values in the list; 0 when empty."""
    return sum(node.data for node in _nodes(head))


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


class LinkedList:
    """A singly linked list that grows at the front."""

    def __init__(self) -> None:
        self.head: ListNode | None = None

    def push(self, value: Any) -> None:
        """Put ``value`` in front of the list."""
        self.head = push(self.head, value)

    def reverse(self) -> None:
        """Reverse the order of the list in place."""
        self.head = reverse(self.head)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"