"""Day 10: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

import string
from collections.abc import Iterator, Sequence

Grid = list[list[int]]
Point = tuple[int, int]

PEAK = 9
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def parse_map(text: str) -> Grid:
    """Parse lines of digits into a grid of heights."""
    grid: Grid = []
    for line in text.strip().split("\n"):
        row = []
        for char in line.strip():
            if char not in string.digits:
                raise ValueError(f"not a height digit: {char!r}")
            row.append(int(char))
        grid.append(row)
    return grid


def trailheads(grid: Sequence[Sequence[int]]) -> list[Point]:
    """Positions of height 0, as ``(row, column)`` in reading order."""
    return [
        (row, col)
        for row, line in enumerate(grid)
        for col, height in enumerate(line)
        if height == 0
    ]


def _in_bounds(grid: Sequence[Sequence[int]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def _peaks_reached(grid: Sequence[Sequence[int]], start: Point) -> Iterator[Point]:
    """Yield the peak at the end of every distinct uphill trail from *start*."""
    stack = [start]
    while stack:
        row, col = stack.pop()
        height = grid[row][col]
        for dr, dc in _STEPS:
            r, c = row + dr, col + dc
            if _in_bounds(grid, r, c) and grid[r][c] == height + 1:
                if grid[r][c] == PEAK:
                    yield r, c
                else:
                    stack.append((r, c))


def trailhead_score(grid: Sequence[Sequence[int]], start: Point) -> int:
    """Number of distinct peaks reachable from *start*."""
    return len(set(_peaks_reached(grid, start)))


def trailhead_rating(grid: Sequence[Sequence[int]], start: Point) -> int:
    """Number of distinct uphill trails from *start* to any peak."""
    return sum(1 for _ in _peaks_reached(grid, start))


def total_score(grid: Sequence[Sequence[int]]) -> int:
    """Sum of the scores of all trailheads."""
    return sum(trailhead_score(grid, start) for start in trailheads(grid))


def total_rating(grid: Sequence[Sequence[int]]) -> int:
    """Sum of the ratings of all trailheads."""
    return sum(trailhead_rating(grid, start) for start in trailheads(grid))