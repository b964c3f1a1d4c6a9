"""Day 2: safety of reactor level reports."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum, auto

MAX_STEP = 3


class _Trend(Enum):
    NONE = auto()
    INCREASING = auto()
    DECREASING = auto()


def parse_reports(text: str) -> dict[str, list[int]]:
    """Parse lines of the form ``name = [1, 2, 3]`` into a mapping.

    Lines without ``=`` are ignored, as are list items that are not integers.
    A repeated name keeps its last list.
    """
    reports: dict[str, list[int]] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            continue
        levels = []
        for item in value.strip().strip("[]").split(","):
            try:
                levels.append(int(item.strip()))
            except ValueError:
                continue
        reports[key.strip()] = levels
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """True if levels strictly rise or fall with steps of at most three."""
    trend = _Trend.NONE
    for previous, current in zip(levels, levels[1:]):
        step_ok = abs(current - previous) <= MAX_STEP
        if previous < current and step_ok and trend is not _Trend.DECREASING:
            trend = _Trend.INCREASING
        elif previous > current and step_ok and trend is not _Trend.INCREASING:
            trend = _Trend.DECREASING
        else:
            return False
    return True


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """True if the report is safe, or becomes safe with one level removed."""
    levels = list(levels)
    if is_safe(levels):
        return True
    return any(
        is_safe(levels[:index] + levels[index + 1:]) for index in range(len(levels))
    )


def _iter_reports(
    reports: Mapping[str, Sequence[int]] | Iterable[Sequence[int]],
) -> Iterable[Sequence[int]]:
    if isinstance(reports, Mapping):
        return reports.values()
    return reports


def count_safe(
    reports: Mapping[str, Sequence[int]] | Iterable[Sequence[int]],
) -> int:
    """Number of safe reports, given a mapping or an iterable of reports."""
    return sum(1 for levels in _iter_reports(reports) if is_safe(levels))


def count_safe_dampened(
    reports: Mapping[str, Sequence[int]] | Iterable[Sequence[int]],
) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(1 for levels in _iter_reports(reports) if is_safe_dampened(levels))