from collections import Counter

import pytest

from advent2024.day11 import blink, blink_counts, count_stones, parse_stones


def test_parse_stones():
    assert parse_stones("125 17\n") == ["125", "17"]


def test_blink_rules():
    assert blink(["0", "1", "10", "99", "999"]) == [
        "1", "2024", "1", "0", "9", "9", "2021976",
    ]


def test_six_blinks_example():
    stones = parse_stones("125 17")
    for _ in range(6):
        stones = blink(stones)
    assert len(stones) == 22


def test_twenty_five_blinks_example():
    assert count_stones("125 17", 25) == 55312


def test_default_blinks_is_twenty_five():
    assert count_stones("125 17") == count_stones("125 17", 25)


def test_zero_blinks_counts_input():
    assert count_stones("3 3 7 100", 0) == 4


@pytest.mark.parametrize("blinks", range(1, 9))
def test_counts_match_list_simulation(blinks):
    stones = parse_stones("125 17 0 1")
    for _ in range(blinks):
        stones = blink(stones)
    assert count_stones("125 17 0 1", blinks) == len(stones)


def test_blink_counts_agrees_with_blink():
    stones = ["0", "12", "2024", "7", "12"]
    counts = blink_counts(Counter(stones))
    assert counts == dict(Counter(blink(stones)))


def test_blink_bad_stone():
    with pytest.raises(ValueError):
        blink(["abc"])


def test_negative_blinks_rejected():
    with pytest.raises(ValueError):
        count_stones("1", -1)