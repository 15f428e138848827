"""Matrix helpers on plain nested lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["transpose"]


def transpose(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    """Return the transpose of a rectangular matrix given as rows."""
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    return [list(column) for column in zip(*rows)]