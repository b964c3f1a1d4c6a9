"""Day 3: scanning corrupted memory for multiplications."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)", re.ASCII)
_MUL_OR_TOGGLE = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)", re.ASCII)


def sum_multiplications(text: str) -> int:
    """Sum the products of every ``mul(a,b)`` instruction in *text*."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def sum_enabled_multiplications(text: str) -> int:
    """Like :func:`sum_multiplications`, honouring ``do()`` and ``don't()``."""
    enabled = True
    total = 0
    for match in _MUL_OR_TOGGLE.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total