"""Day 8: antinodes of resonating antenna pairs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

from advent2024.day06 import BORDER, parse_room

Point = tuple[int, int]

_NOT_TOWERS = {".", "#", BORDER}


def parse_grid(text: str) -> list[list[str]]:
    """Parse the map into a grid surrounded by a border of ``/``."""
    return parse_room(text)


def find_towers(grid: Sequence[Sequence[str]]) -> dict[str, list[Point]]:
    """Map each frequency to its antenna positions as ``(column, row)``."""
    towers: dict[str, list[Point]] = {}
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell not in _NOT_TOWERS:
                towers.setdefault(cell, []).append((col, row))
    return towers


def _limits(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    return len(grid) - 1, len(grid[0]) - 1


def count_antinodes(text: str) -> int:
    """Number of distinct cells one antenna distance beyond each pair."""
    grid = parse_grid(text)
    x_len, _ = _limits(grid)
    found: set[Point] = set()
    for positions in find_towers(grid).values():
        for (x1, y1), (x2, y2) in combinations(positions, 2):
            dx, dy = x1 - x2, y1 - y2
            for candidate in ((x1 + dx, y1 + dy), (x2 - dx, y2 - dy)):
                # Both coordinates are bounded by the same limit here.
                if all(0 < value < x_len for value in candidate):
                    found.add(candidate)
    return len(found)


def resonant_positions(p1: Point, p2: Point, x_len: int, y_len: int) -> list[Point]:
    """Cells in line with two antennas, walking outward from each one.

    A cell counts when ``0 < x < x_len`` and ``0 < y < y_len``. The antennas
    themselves are included when in bounds.
    """
    if p1 == p2:
        raise ValueError("the two antennas must be at different positions")
    dx, dy = p1[0] - p2[0], p1[1] - p2[1]

    def walk(start: Point, sx: int, sy: int) -> list[Point]:
        out: list[Point] = []
        x, y = start
        while 0 < x < x_len and 0 < y < y_len:
            out.append((x, y))
            x, y = x + sx, y + sy
        return out

    return walk(p1, dx, dy) + walk(p2, -dx, -dy)


def count_resonant_antinodes(text: str) -> int:
    """Number of distinct cells in line with any pair of same-frequency antennas."""
    grid = parse_grid(text)
    x_len, y_len = _limits(grid)
    found: set[Point] = set()
    for positions in find_towers(grid).values():
        for p1, p2 in combinations(positions, 2):
            found.update(resonant_positions(p1, p2, x_len, y_len))
    return len(found)