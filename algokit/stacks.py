"""Bounded stack and queue, and bracket balancing."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = [
    "CapacityError",
    "EmptyError",
    "BoundedStack",
    "BoundedQueue",
    "is_balanced",
]

_OPENERS = "([{"
_CLOSERS = {")": "(", "]": "[", "}": "{"}


class CapacityError(OverflowError):
    """Raised when adding to a full container."""


class EmptyError(IndexError):
    """Raised when reading from an empty container."""


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise CapacityError when full."""
        if len(self._items) >= self.capacity:
            raise CapacityError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from bottom to top."""
        return iter(self._items)


class BoundedQueue:
    """A FIFO queue holding at most ``capacity`` values.

    Iteration and positions run from the newest value to the oldest.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value``; raise CapacityError when full."""
        if len(self._items) >= self.capacity:
            raise CapacityError("queue overflow")
        self._items.appendleft(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest value."""
        if not self._items:
            raise EmptyError("queue underflow")
        return self._items.pop()

    def index_of(self, value: Any) -> int | None:
        """Position of ``value`` counted from the newest entry, or None if absent."""
        if not self._items:
            raise EmptyError("queue is empty")
        try:
            return self._items.index(value)
        except ValueError:
            return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


def is_balanced(expression: str) -> bool:
    """True when every (), [] and {} in ``expression`` is properly matched and nested."""
    open_brackets: list[str] = []
    for char in expression:
        if char in _OPENERS:
            open_brackets.append(char)
        elif char in _CLOSERS:
            if not open_brackets or open_brackets.pop() != _CLOSERS[char]:
                return False
    return not open_brackets