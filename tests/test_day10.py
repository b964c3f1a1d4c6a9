import pytest

from advent2024.day10 import (
    parse_map,
    total_rating,
    total_score,
    trailhead_rating,
    trailhead_score,
    trailheads,
)

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


@pytest.fixture
def grid():
    return parse_map(EXAMPLE)


def test_parse_round_trip():
    grid = parse_map(EXAMPLE)
    assert ["".join(str(h) for h in row) for row in grid] == EXAMPLE.split()


def test_parse_rejects_letters():
    with pytest.raises(ValueError):
        parse_map("01a\n123")


def test_trailheads_are_zeros(grid):
    heads = trailheads(grid)
    assert heads
    assert all(grid[r][c] == 0 for r, c in heads)
    zero_count = sum(row.count(0) for row in grid)
    assert len(heads) == zero_count
    assert heads == sorted(heads)


def test_example_score(grid):
    assert total_score(grid) == 36


def test_example_rating(grid):
    assert total_rating(grid) == 81


def test_rating_at_least_score(grid):
    for start in trailheads(grid):
        assert trailhead_rating(grid, start) >= trailhead_score(grid, start)


def test_totals_are_sums(grid):
    heads = trailheads(grid)
    assert total_score(grid) == sum(trailhead_score(grid, s) for s in heads)
    assert total_rating(grid) == sum(trailhead_rating(grid, s) for s in heads)


def test_single_straight_trail():
    grid = parse_map("0123456789")
    assert trailhead_score(grid, (0, 0)) == trailhead_rating(grid, (0, 0)) == 1


def test_no_peak_reachable():
    grid = parse_map("0123\n5555")
    assert total_score(grid) == total_rating(grid) == sum(grid[1]) - 20