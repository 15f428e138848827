"""Classic puzzles: 0/1 knapsack, Tower of Hanoi and N queens."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Move", "knapsack", "hanoi_moves", "n_queens"]


@dataclass(frozen=True)
class Move:
    """A single Tower of Hanoi move of ``disk`` from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move the disc {self.disk} from {self.source} to {self.target}"


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Best total value of items fitting in ``capacity``, each used at most once."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    try:
        items = list(zip(weights, values, strict=True))
    except ValueError:
        raise ValueError("weights and values must have the same length") from None
    if any(weight < 0 for weight, _ in items):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def _hanoi(disks: int, source: str, target: str, spare: str) -> Iterator[Move]:
    if disks == 0:
        return
    yield from _hanoi(disks - 1, source, spare, target)
    yield Move(disks, source, target)
    yield from _hanoi(disks - 1, spare, target, source)


def hanoi_moves(
    disks: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    return _hanoi(disks, source, target, spare)


def _place(n: int, columns: tuple[int, ...]) -> Iterator[list[list[int]]]:
    row = len(columns)
    if row == n:
        yield [[int(c == col) for c in range(n)] for col in columns]
        return
    for col in range(n):
        if all(
            col != c and abs(col - c) != row - r for r, c in enumerate(columns)
        ):
            yield from _place(n, columns + (col,))


def n_queens(n: int) -> Iterator[list[list[int]]]:
    """Yield every placement of ``n`` non-attacking queens as a 0/1 board.

    Queens are placed row by row, trying columns from left to right, so the
    boards come in that order.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    return _place(n, ())