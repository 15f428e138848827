"""Small string utilities."""

from __future__ import annotations

from collections import Counter

__all__ = ["are_anagrams", "char_frequency"]


def are_anagrams(first: str, second: str) -> bool:
    """True when the two strings hold the same characters, counted with repeats."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def char_frequency(text: str, char: str) -> int:
    """Number of times the single character ``char`` occurs in ``text``."""
    if len(char) != 1:
        raise ValueError("char must be exactly one character")
    return text.count(char)