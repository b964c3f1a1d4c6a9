import pytest

from advent2024.day01 import parse_columns, similarity_score, total_distance

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_columns_splits_lines():
    left, right = parse_columns(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_parse_columns_skips_blank_lines():
    assert parse_columns("\n1 2\n\n7 8\n") == ([1, 7], [2, 8])


def test_parse_columns_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_columns("1 2 3\n")


def test_parse_columns_rejects_non_number():
    with pytest.raises(ValueError):
        parse_columns("1 x\n")


def test_total_distance_example():
    left, right = parse_columns(EXAMPLE)
    assert total_distance(left, right) == 11


def test_total_distance_is_symmetric():
    left, right = parse_columns(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_total_distance_ignores_order():
    left, right = parse_columns(EXAMPLE)
    assert total_distance(left, right) == total_distance(
        list(reversed(left)), sorted(right)
    )


def test_total_distance_of_list_with_itself():
    values = [23238, 94370, 15509, 48816]
    assert total_distance(values, list(reversed(values))) == 0


def test_total_distance_length_mismatch():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_similarity_score_example():
    left, right = parse_columns(EXAMPLE)
    assert similarity_score(left, right) == 31


def test_similarity_score_disjoint_lists():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == 0


def test_similarity_single_match_is_value():
    assert similarity_score([72666], [72666, 44568]) == 72666