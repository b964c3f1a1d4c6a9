"""Day 4: word search for XMAS."""

from __future__ import annotations

from collections.abc import Sequence

Grid = list[list[str]]

_DIRECTIONS = [
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
]

# Each pattern lists (row offset, column offset, letter) for one X-shaped MAS.
_CROSS_PATTERNS = [
    ((0, 0, "M"), (0, 2, "M"), (1, 1, "A"), (2, 0, "S"), (2, 2, "S")),
    ((0, 0, "M"), (0, 2, "S"), (1, 1, "A"), (2, 0, "M"), (2, 2, "S")),
    ((0, 0, "S"), (0, 2, "S"), (1, 1, "A"), (2, 0, "M"), (2, 2, "M")),
    ((0, 0, "S"), (0, 2, "M"), (1, 1, "A"), (2, 0, "S"), (2, 2, "M")),
]


def parse_grid(text: str) -> Grid:
    """Turn text into a list of character rows, one per ``\\n``-separated line."""
    return [list(line) for line in text.split("\n")]


def _has(grid: Sequence[Sequence[str]], row: int, col: int, letter: str) -> bool:
    if row < 0 or col < 0 or row >= len(grid):
        return False
    line = grid[row]
    return col < len(line) and line[col] == letter


def _starts(grid: Sequence[Sequence[str]]):
    # Row indices run over the first row's width, columns over the row count.
    if not grid:
        return
    for col in range(len(grid)):
        for row in range(len(grid[0])):
            yield row, col


def count_xmas(grid: Sequence[Sequence[str]]) -> int:
    """Count occurrences of ``XMAS`` in all eight directions."""
    return sum(
        all(
            _has(grid, row + dr * step, col + dc * step, letter)
            for step, letter in enumerate("XMAS")
        )
        for row, col in _starts(grid)
        for dr, dc in _DIRECTIONS
    )


def count_x_mas(grid: Sequence[Sequence[str]]) -> int:
    """Count two ``MAS`` words crossing in the shape of an X."""
    return sum(
        all(_has(grid, row + dr, col + dc, letter) for dr, dc, letter in pattern)
        for row, col in _starts(grid)
        for pattern in _CROSS_PATTERNS
    )