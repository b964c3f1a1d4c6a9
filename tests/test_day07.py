import pytest

from advent2024.day07 import (
    ALL_OPERATORS,
    BASIC_OPERATORS,
    concat,
    evaluate,
    find_solutions,
    parse_equations,
    total_calibration,
)

SAMPLE = (
    "190: 10 19\n3267: 81 40 27\n83: 17 5\n156: 15 6\n7290: 6 8 6 15\n"
    "161011: 16 10 13\n192: 17 8 14\n21037: 9 7 18 13\n292: 11 6 16 20"
)


def test_parse_equations_sample():
    equations = parse_equations(SAMPLE)
    assert len(equations) == 9
    assert equations[0] == (190, [10, 19])
    assert equations[-1] == (292, [11, 6, 16, 20])


def test_parse_equations_skips_blank_lines():
    assert parse_equations("190: 10 19\n\n83: 17 5\n") == [(190, [10, 19]), (83, [17, 5])]


def test_parse_equations_missing_colon():
    with pytest.raises(ValueError):
        parse_equations("190 10 19")


def test_concat_joins_digits():
    assert concat(15, 6) == 156
    assert concat(12, 345) == 12345


def test_evaluate_left_to_right():
    assert evaluate("81 + 40 * 27") == 3267
    assert evaluate("81 * 40 + 27") == 3267


def test_evaluate_concatenation():
    assert evaluate("15 || 6") == 156


def test_evaluate_unknown_operator():
    with pytest.raises(ValueError):
        evaluate("1 - 2")


def test_find_solutions_in_order():
    assert find_solutions(190, [10, 19], BASIC_OPERATORS) == ["10 * 19"]
    assert find_solutions(3267, [81, 40, 27], BASIC_OPERATORS) == [
        "81 + 40 * 27",
        "81 * 40 + 27",
    ]


def test_find_solutions_none():
    assert find_solutions(83, [17, 5], BASIC_OPERATORS) == []


def test_find_solutions_with_concatenation():
    assert find_solutions(156, [15, 6], ALL_OPERATORS) == ["15 || 6"]
    assert find_solutions(156, [15, 6], BASIC_OPERATORS) == []


def test_find_solutions_single_number():
    assert find_solutions(7, [7]) == ["7"]
    assert find_solutions(8, [7]) == []


def test_find_solutions_every_result_evaluates_to_target():
    for target, numbers in parse_equations(SAMPLE):
        for expression in find_solutions(target, numbers, ALL_OPERATORS):
            assert evaluate(expression) == target


def test_find_solutions_empty_numbers():
    with pytest.raises(ValueError):
        find_solutions(1, [])


def test_total_calibration_sample():
    equations = parse_equations(SAMPLE)
    assert total_calibration(equations, BASIC_OPERATORS) == 3749
    assert total_calibration(equations, ALL_OPERATORS) == 11387