"""Day 7: inserting operators so that equations come out right."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import product

ADD = "+"
MULTIPLY = "*"
CONCATENATE = "||"

BASIC_OPERATORS: tuple[str, ...] = (ADD, MULTIPLY)
ALL_OPERATORS: tuple[str, ...] = (ADD, MULTIPLY, CONCATENATE)

Equation = tuple[int, list[int]]


def parse_equations(text: str) -> list[Equation]:
    """Parse ``target: n1 n2 ...`` lines into ``(target, numbers)`` pairs."""
    equations: list[Equation] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        head, sep, tail = line.partition(":")
        if not sep:
            raise ValueError(f"line {lineno}: expected 'target: numbers', got {line!r}")
        try:
            target = int(head.strip())
            numbers = [int(item) for item in tail.split(" ") if item]
        except ValueError as exc:
            raise ValueError(f"line {lineno}: bad number in {line!r}") from exc
        equations.append((target, numbers))
    return equations


def concat(left: int, right: int) -> int:
    """Join the decimal digits of *left* and *right* into one number."""
    return int(f"{left}{right}")


def evaluate(expression: str) -> int:
    """Evaluate a space-separated expression strictly from left to right."""
    tokens = expression.split()
    if not tokens:
        raise ValueError("empty expression")
    if len(tokens) % 2 == 0:
        raise ValueError(f"dangling operator in {expression!r}")
    result = int(tokens[0])
    for operator, operand in zip(tokens[1::2], tokens[2::2]):
        value = int(operand)
        if operator == ADD:
            result += value
        elif operator == MULTIPLY:
            result *= value
        elif operator == CONCATENATE:
            result = concat(result, value)
        else:
            raise ValueError(f"unknown operator {operator!r}")
    return result


def _expressions(numbers: Sequence[int], operators: Sequence[str]) -> Iterable[str]:
    for chosen in product(operators, repeat=len(numbers) - 1):
        parts = [str(numbers[0])]
        for operator, number in zip(chosen, numbers[1:]):
            parts.extend((operator, str(number)))
        yield " ".join(parts)


def find_solutions(
    target: int,
    numbers: Sequence[int],
    operators: Sequence[str] = BASIC_OPERATORS,
) -> list[str]:
    """Every expression over *numbers* and *operators* that equals *target*."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    unknown = set(operators) - set(ALL_OPERATORS)
    if unknown:
        raise ValueError(f"unknown operators: {sorted(unknown)}")
    return [
        expression
        for expression in _expressions(numbers, operators)
        if evaluate(expression) == target
    ]


def total_calibration(
    equations: Iterable[Equation],
    operators: Sequence[str] = BASIC_OPERATORS,
) -> int:
    """Sum of the targets of the equations that can be made true."""
    return sum(
        target
        for target, numbers in equations
        if find_solutions(target, numbers, operators)
    )