"""A singly linked circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularList:
    """A circular singly linked list; the last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _link_after_tail(self, value: Any) -> _Node:
        node = _Node(value)
        if self._tail is None:
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        self._tail = self._link_after_tail(value)

    def insert_front(self, value: Any) -> None:
        """Add ``value`` as the new first node."""
        self._link_after_tail(value)

    def insert_after(self, position: int, value: Any) -> None:
        """Add ``value`` after the ``position``-th node, counting from 1 and wrapping.

        Position 0 inserts after the first node, as position 1 does.
        """
        if position < 0:
            raise ValueError("position cannot be negative")
        if self._tail is None:
            raise IndexError("cannot insert after a node of an empty list")
        node = self._tail.next
        for _ in range(position - 1):
            node = node.next
        new = _Node(value)
        new.next = node.next
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the ``position``-th node, counting from 1, and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        before = self._tail
        for _ in range(position - 1):
            before = before.next
        target = before.next
        if self._size == 1:
            self._tail = None
        else:
            before.next = target.next
            if target is self._tail:
                self._tail = before
        self._size -= 1
        return target.value

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"