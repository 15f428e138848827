"""Classic comparison sorts.

Every function takes any iterable and returns a new sorted list. The input
is never modified.
"""

from __future__ import annotations

from bisect import insort_left
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = [
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "merge_sorted",
    "pancake_flips",
    "pancake_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with bubble sort, stopping early once a pass makes no swap."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value in front of any equal ones already placed."""
    result: list[Any] = []
    for value in values:
        insort_left(result, value)
    return result


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining value into place."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> Iterator[Any]:
    left_iter, right_iter = iter(left), iter(right)
    sentinel = object()
    a = next(left_iter, sentinel)
    b = next(right_iter, sentinel)
    while a is not sentinel and b is not sentinel:
        if a <= b:
            yield a
            a = next(left_iter, sentinel)
        else:
            yield b
            b = next(right_iter, sentinel)
    if a is not sentinel:
        yield a
        yield from left_iter
    if b is not sentinel:
        yield b
        yield from right_iter


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(_merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Sort two unsorted collections and merge them into one sorted list."""
    return list(_merge(merge_sort(first), merge_sort(second)))


def _is_sorted(items: list[Any]) -> bool:
    return all(a <= b for a, b in zip(items, items[1:]))


def pancake_flips(values: Iterable[Any]) -> list[int]:
    """Return the prefix lengths flipped, in order, to pancake-sort ``values``.

    Each round flips the largest unsorted value to the front and then flips
    the whole unsorted prefix, so the flips come in pairs. An already sorted
    input needs no flips.
    """
    items = list(values)
    flips: list[int] = []
    end = len(items)
    while not _is_sorted(items):
        largest = max(range(end), key=items.__getitem__)
        for size in (largest + 1, end):
            items[:size] = items[size - 1 :: -1]
            flips.append(size)
        end -= 1
    return flips


def pancake_sort(values: Iterable[Any]) -> list[Any]:
    """Sort using only prefix reversals."""
    items = list(values)
    for size in pancake_flips(items):
        items[:size] = items[size - 1 :: -1]
    return items