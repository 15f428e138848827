"""Binary tree nodes and depth-first and level-order walks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Node",
    "inorder_recursive",
    "inorder_iterative",
    "preorder_recursive",
    "preorder_iterative",
    "leaf_sums_by_level",
]


@dataclass
class Node:
    """A binary tree node."""

    value: Any
    left: Node | None = None
    right: Node | None = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def _inorder(node: Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def inorder_recursive(root: Node | None) -> list[Any]:
    """Values in left, root, right order, walked recursively."""
    return list(_inorder(root))


def inorder_iterative(root: Node | None) -> list[Any]:
    """Values in left, root, right order, walked with an explicit stack."""
    result: list[Any] = []
    pending: list[Node] = []
    node = root
    while pending or node is not None:
        if node is not None:
            pending.append(node)
            node = node.left
        else:
            node = pending.pop()
            result.append(node.value)
            node = node.right
    return result


def _preorder(node: Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def preorder_recursive(root: Node | None) -> list[Any]:
    """Values in root, left, right order, walked recursively."""
    return list(_preorder(root))


def preorder_iterative(root: Node | None) -> list[Any]:
    """Values in root, left, right order, walked with an explicit stack."""
    result: list[Any] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.value)
        # Right goes on first so that left comes off first.
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def leaf_sums_by_level(root: Node | None) -> list[Any]:
    """Sum of the leaf values on each level, from the root level downward.

    A level with no leaves contributes 0. Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("no nodes present")
    sums: list[Any] = []
    queue: deque[tuple[Node, int]] = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        if level == len(sums):
            sums.append(0)
        if node.is_leaf:
            sums[level] += node.value
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))
    return sums