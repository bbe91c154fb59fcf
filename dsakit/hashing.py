"""Integer hash tables: separate chaining and open addressing with quadratic probing."""

from __future__ import annotations

from collections.abc import Iterator

_TOMBSTONE = object()


class ChainedHashTable:
    """A hash table of integer keys whose buckets are lists of (key, value) pairs.

    Inserting a key again adds another pair rather than replacing the first.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._buckets: list[list[tuple[int, int]]] = [[] for _ in range(capacity)]

    def _bucket(self, key: int) -> list[tuple[int, int]]:
        return self._buckets[key % self._capacity]

    def insert(self, key: int, value: int) -> None:
        """Append the pair to the key's bucket."""
        self._bucket(key).append((key, value))

    def delete(self, key: int) -> None:
        """Remove the first pair with ``key``; do nothing if there is none."""
        bucket = self._bucket(key)
        for index, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[index]
                return

    def render(self) -> str:
        """Return one line per bucket, such as ``0 : (10,100)->NULL``."""
        lines = (
            f"{index} : " + "".join(f"({k},{v})->" for k, v in bucket) + "NULL"
            for index, bucket in enumerate(self._buckets)
        )
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(stored == key for stored, _ in self._bucket(key))


class QuadraticProbingMap:
    """An open-addressing map of integer keys probing at hash + i*i.

    Inserting a key that is already present leaves its value unchanged.
    Deleted slots are marked and reused by later inserts.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots: list[object] = [None] * capacity
        self._size = 0

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self._capacity
        for step in range(self._capacity):
            yield (start + step * step) % self._capacity

    def insert(self, key: int, value: int) -> None:
        """Store ``value`` under ``key`` unless the key is already present.

        Raises OverflowError when the probe sequence reaches no free slot.
        """
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is _TOMBSTONE:
                self._slots[index] = (key, value)
                self._size += 1
                return
            if slot[0] == key:
                return
        raise OverflowError(f"no free slot reachable for key {key}")

    def delete(self, key: int) -> bool:
        """Remove ``key``; return whether it was present."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return False
            if slot is not _TOMBSTONE and slot[0] == key:
                self._slots[index] = _TOMBSTONE
                self._size -= 1
                return True
        return False

    def get(self, key: int) -> int | None:
        """Return the value stored under ``key``, or None."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _TOMBSTONE and slot[0] == key:
                return slot[1]
        return None

    def render(self) -> str:
        """Return one line per slot: ``i : NULL``, ``i : (-1,-1)`` or ``i : key->value``."""
        lines = []
        for index, slot in enumerate(self._slots):
            if slot is None:
                text = "NULL"
            elif slot is _TOMBSTONE:
                text = "(-1,-1)"
            else:
                text = f"{slot[0]}->{slot[1]}"
            lines.append(f"{index} : {text}")
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.get(key) is not None