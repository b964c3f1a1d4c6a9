"""Day 11: stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

MULTIPLIER = 2024


def parse_stones(text: str) -> list[str]:
    """Split a space-separated line of stone numbers."""
    return [item.strip() for item in text.strip().split(" ")]


def _change(stone: str) -> tuple[str, ...]:
    if stone == "0":
        return ("1",)
    if len(stone) % 2 == 0:
        half = len(stone) // 2
        return stone[:half], str(int(stone[half:]))
    return (str(int(stone) * MULTIPLIER),)


def blink(stones: Iterable[str]) -> list[str]:
    """The row of stones after one blink, in order."""
    return [new for stone in stones for new in _change(stone)]


def blink_counts(counts: Mapping[str, int]) -> dict[str, int]:
    """One blink applied to a multiset of stones given as ``{stone: count}``."""
    out: Counter[str] = Counter()
    for stone, count in counts.items():
        for new in _change(stone):
            out[new] += count
    return dict(out)


def count_stones(text: str, blinks: int = 25) -> int:
    """Number of stones after blinking *blinks* times."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    counts: dict[str, int] = dict(Counter(parse_stones(text)))
    for _ in range(blinks):
        counts = blink_counts(counts)
    return sum(counts.values())