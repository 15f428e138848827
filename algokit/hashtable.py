"""Open-addressing hash table with linear probing and replacement."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["TableFullError", "LinearProbingTable"]


class TableFullError(Exception):
    """Raised when a value is inserted into a table with no free slot."""


class LinearProbingTable:
    """Fixed-size table of integers hashed by ``value % size``.

    When a value's home slot is held by a value that belongs elsewhere, the
    newcomer takes the slot and the displaced value moves on to the next
    free slot.
    """

    def __init__(self, size: int = 8) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._slots: list[int | None] = [None] * size
        self._count = 0

    @property
    def slots(self) -> tuple[int | None, ...]:
        """Slot contents in order, None for a free slot."""
        return tuple(self._slots)

    def _home(self, value: int) -> int:
        return value % len(self._slots)

    def _next_free(self, start: int) -> int:
        size = len(self._slots)
        for step in range(1, size + 1):
            index = (start + step) % size
            if self._slots[index] is None:
                return index
        raise TableFullError(f"hash table is full with {size} values")

    def insert(self, value: int) -> int:
        """Store ``value`` and return the slot it went to."""
        home = self._home(value)
        occupant = self._slots[home]
        if occupant is None:
            self._slots[home] = value
        else:
            free = self._next_free(home)
            if self._home(occupant) == home:
                self._slots[free] = value
                home = free
            else:
                self._slots[free] = occupant
                self._slots[home] = value
        self._count += 1
        return home

    def search(self, value: int) -> int | None:
        """Slot index holding ``value``, or None when it is not stored."""
        size = len(self._slots)
        home = self._home(value)
        for step in range(size):
            index = (home + step) % size
            slot = self._slots[index]
            if slot == value:
                return index
            if slot is None:
                return None
        return None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        return (value for value in self._slots if value is not None)

    def __len__(self) -> int:
        return self._count