"""Day 1: comparing two location lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def parse_columns(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated integers into two lists."""
    left: list[int] = []
    right: list[int] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValueError(f"line {lineno}: expected two numbers, got {line!r}")
        first, second = (int(field) for field in fields)
        left.append(first)
        right.append(second)
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of the distances between the lists paired in sorted order."""
    if len(left) != len(right):
        raise ValueError(
            f"lists differ in length: {len(left)} and {len(right)}"
        )
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of each left value times how often it appears in the right list."""
    occurrences = Counter(right)
    return sum(abs(value * occurrences[value]) for value in left)