"""Linked lists: doubly linked, circular doubly linked and circular singly linked."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList", "CircularDoublyLinkedList", "CircularLinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList:
    """A doubly linked list that grows at the head."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current head."""
        node = _Node(value, next=self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node
        self._size += 1

    def remove_inner(self, value: Any) -> None:
        """Unlink the first node holding ``value``, which must be neither head nor tail.

        Raises ValueError when the value is absent or sits at either end.
        """
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ValueError(f"{value!r} not found")
        if node.prev is None or node.next is None:
            raise ValueError(f"{value!r} is not between two other nodes")
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class CircularDoublyLinkedList:
    """A circular doubly linked list that can be reversed in place."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _Node(value)
        if self._head is None:
            node.next = node.prev = node
            self._head = node
        else:
            last = self._head.prev
            assert last is not None
            node.next = self._head
            node.prev = last
            last.next = node
            self._head.prev = node
        self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node
            node = node.next

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        if self._head is None:
            return
        new_head = self._head.prev
        for node in list(self._nodes()):
            node.next, node.prev = node.prev, node.next
        self._head = new_head

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def backward(self) -> Iterator[Any]:
        """Yield the values from the last node back to the head."""
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


class CircularLinkedList:
    """A circular singly linked list where new values become the head."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Insert ``value`` as the new head."""
        node = _Node(value)
        if self._head is None or self._tail is None:
            node.next = node
            self._head = self._tail = node
        else:
            node.next = self._head
            self._tail.next = node
            self._head = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if none does."""
        previous, current = self._tail, self._head
        for _ in range(self._size):
            assert previous is not None and current is not None
            if current.value == value:
                if self._size == 1:
                    self._head = self._tail = None
                else:
                    previous.next = current.next
                    if current is self._head:
                        self._head = current.next
                    if current is self._tail:
                        self._tail = previous
                self._size -= 1
                return
            previous, current = current, current.next
        raise ValueError(f"{value!r} not found")

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size