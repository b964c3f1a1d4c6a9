"""Day 5: checking print queue updates against page ordering rules."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

Rules = dict[int, list[int]]


def parse_rules(text: str) -> Rules:
    """Parse ``X|Y`` lines into a map from each page to pages that precede it.

    ``47|53`` means page 47 must come before page 53, so it is stored as
    ``{53: [47]}``. Blank lines are skipped.
    """
    rules: Rules = {}
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        parts = line.split("|")
        if len(parts) < 2:
            raise ValueError(f"rule line {lineno}: expected 'X|Y', got {line!r}")
        try:
            before = int(parts[0].strip())
            after = int(parts[1].strip())
        except ValueError as exc:
            raise ValueError(f"rule line {lineno}: bad page number in {line!r}") from exc
        rules.setdefault(after, []).append(before)
    return rules


def _parse_update(line: str) -> list[int]:
    pages = []
    for item in line.split(","):
        try:
            pages.append(int(item.strip()))
        except ValueError:
            continue
    return pages


def is_ordered(update: Sequence[int], rules: Mapping[int, Sequence[int]]) -> bool:
    """True if no page is followed by a page that the rules put before it."""
    for index, page in enumerate(update):
        required_before = rules.get(page)
        if required_before and any(
            later in required_before for later in update[index:]
        ):
            return False
    return True


def sum_ordered_middles(text: str) -> int:
    """Sum the middle page of every correctly ordered update in *text*.

    The text holds the rules, a blank line, then one update per line.
    """
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("input has no blank line between rules and updates")
    rules = parse_rules(sections[0])
    total = 0
    for line in sections[1].split("\n"):
        update = _parse_update(line)
        if update and is_ordered(update, rules):
            total += update[len(update) // 2]
    return total