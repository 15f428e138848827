"""Searching and subarray optimisation routines."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any

__all__ = [
    "linear_search",
    "binary_search",
    "find_pages",
    "max_window_sum",
    "max_subarray_sum",
    "max_subarray_sum_brute",
]


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in the ascending ``values``, or None."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    used, load = 1, 0
    for count in pages:
        load += count
        if load > limit:
            used += 1
            load = count
        if used > students:
            return False
    return True


def find_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages given to one student.

    Books are handed out in order, in contiguous runs, and every student gets
    at least one book. Raises ValueError when no such allocation exists.
    """
    if students < 1 or len(pages) < students:
        raise ValueError(
            f"cannot give {len(pages)} books to {students} students"
        )
    low, high = max(pages), sum(pages)
    best = high
    while low <= high:
        middle = (low + high) // 2
        if _fits(pages, students, middle):
            best = middle
            high = middle - 1
        else:
            low = middle + 1
    return best


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Largest sum of ``k`` consecutive values (sliding window)."""
    if k < 0 or len(values) < k:
        raise ValueError(f"window of size {k} does not fit {len(values)} values")
    window = best = sum(values[:k])
    for incoming, outgoing in zip(values[k:], values):
        window += incoming - outgoing
        best = max(best, window)
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, checking every run."""
    if not values:
        raise ValueError("max_subarray_sum_brute() of an empty sequence")
    return max(
        max(accumulate(values[start:])) for start in range(len(values))
    )