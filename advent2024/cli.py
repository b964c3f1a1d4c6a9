"""Command-line entry point: solve one puzzle part from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from advent2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
)
from advent2024.inputs import DEFAULT_INPUT, read_input

Solver = Callable[[str], int]

_SOLVERS: dict[tuple[int, int], Solver] = {
    (1, 1): lambda text: day01.total_distance(*day01.parse_columns(text)),
    (1, 2): lambda text: day01.similarity_score(*day01.parse_columns(text)),
    (2, 1): lambda text: day02.count_safe(day02.parse_reports(text)),
    (2, 2): lambda text: day02.count_safe_dampened(day02.parse_reports(text)),
    (3, 1): day03.sum_multiplications,
    (3, 2): day03.sum_enabled_multiplications,
    (4, 1): lambda text: day04.count_xmas(day04.parse_grid(text)),
    (4, 2): lambda text: day04.count_x_mas(day04.parse_grid(text)),
    (5, 1): day05.sum_ordered_middles,
    (6, 1): day06.count_visited,
    (6, 2): day06.count_loop_positions,
    (7, 1): lambda text: day07.total_calibration(
        day07.parse_equations(text), day07.BASIC_OPERATORS
    ),
    (7, 2): lambda text: day07.total_calibration(
        day07.parse_equations(text), day07.ALL_OPERATORS
    ),
    (8, 1): day08.count_antinodes,
    (8, 2): day08.count_resonant_antinodes,
    (9, 1): day09.compact_blocks_checksum,
    (9, 2): day09.compact_files_checksum,
    (10, 1): lambda text: day10.total_score(day10.parse_map(text)),
    (10, 2): lambda text: day10.total_rating(day10.parse_map(text)),
    (11, 1): lambda text: day11.count_stones(text, 25),
    (11, 2): lambda text: day11.count_stones(text, 75),
}

DAYS = sorted({day for day, _ in _SOLVERS})


def solve(day: int, part: int, text: str) -> int:
    """Answer for *day* and *part* of the puzzle, given the input *text*."""
    try:
        solver = _SOLVERS[(day, part)]
    except KeyError:
        raise ValueError(f"no solver for day {day} part {part}") from None
    return solver(text)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent2024", description="Solve one part of a day's puzzle."
    )
    parser.add_argument("day", type=int, choices=DAYS, help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument(
        "-i",
        "--input",
        default=DEFAULT_INPUT,
        help=f"puzzle input file (default: {DEFAULT_INPUT})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; print the answer and return an exit status."""
    args = _parser().parse_args(argv)
    try:
        text = read_input(args.input)
        answer = solve(args.day, args.part, text)
    except (OSError, ValueError) as exc:
        print(f"advent2024: {exc}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())