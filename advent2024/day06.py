"""Day 6: a guard patrolling a lab, and where an obstacle traps her in a loop."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass

Grid = list[list[str]]

BORDER = "/"
WALL = "#"
OBSTRUCTION = "O"
VISITED = "X"
PATROLLED = "|"

_MOVES = {">": (0, 1), "<": (0, -1), "v": (1, 0), "^": (-1, 0)}
_RIGHT_TURN = {">": "v", "v": "<", "<": "^", "^": ">"}


@dataclass
class Guard:
    """Position and facing of the guard."""

    row: int
    col: int
    direction: str

    def __post_init__(self) -> None:
        if self.direction not in _MOVES:
            raise ValueError(f"not a direction: {self.direction!r}")

    @property
    def ahead(self) -> tuple[int, int]:
        """The cell the guard is facing."""
        dr, dc = _MOVES[self.direction]
        return self.row + dr, self.col + dc

    def advance(self) -> None:
        """Move one cell in the facing direction."""
        self.row, self.col = self.ahead

    def turn_right(self) -> None:
        """Turn ninety degrees clockwise."""
        self.direction = _RIGHT_TURN[self.direction]

    @property
    def state(self) -> tuple[int, int, str]:
        return self.row, self.col, self.direction


@dataclass
class Room:
    """A bordered grid with the guard walking through it."""

    grid: Grid
    guard: Guard
    running: bool = True

    def step(self, marker: str = VISITED) -> None:
        """Take one step: leave, turn at an obstacle, or mark and move on."""
        row, col = self.guard.ahead
        ahead = self.grid[row][col]
        if ahead == BORDER:
            self.grid[self.guard.row][self.guard.col] = marker
            self.running = False
        elif ahead in (WALL, OBSTRUCTION):
            self.guard.turn_right()
        else:
            self.grid[self.guard.row][self.guard.col] = marker
            self.guard.advance()

    def run(self, marker: str = VISITED) -> None:
        while self.running:
            self.step(marker)


def parse_room(text: str) -> Grid:
    """Parse non-blank lines into a grid surrounded by a border of ``/``."""
    rows = [[BORDER, *line, BORDER] for line in text.split("\n") if line.strip()]
    if not rows:
        raise ValueError("room map is empty")
    edge = [BORDER] * len(rows[0])
    return [list(edge), *rows, list(edge)]


def find_guard(grid: Sequence[Sequence[str]]) -> Guard | None:
    """The first guard found scanning row by row, or None if there is none."""
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell in _MOVES:
                return Guard(row, col, cell)
    return None


def _start(grid: Grid) -> Guard:
    guard = find_guard(grid)
    if guard is None:
        raise ValueError("room map has no guard")
    return guard


def count_visited(text: str) -> int:
    """Number of distinct cells the guard covers before leaving the room."""
    grid = parse_room(text)
    room = Room(grid, _start(grid))
    room.run(VISITED)
    return sum(line.count(VISITED) for line in room.grid)


def _loops(room: Room) -> bool:
    seen: set[tuple[int, int, str]] = set()
    last: tuple[int, int, str] | None = None
    while room.running:
        room.step(PATROLLED)
        state = room.guard.state
        if state in seen and state != last:
            return True
        seen.add(state)
        last = state
    return False


def count_loop_positions(text: str) -> int:
    """Number of cells on the guard's path where one obstruction traps her."""
    grid = parse_room(text)
    start = _start(grid)
    patrol = Room(copy.deepcopy(grid), copy.copy(start))
    patrol.run(VISITED)
    candidates = [
        (row, col)
        for row, line in enumerate(patrol.grid)
        for col, cell in enumerate(line)
        if cell == VISITED and (row, col) != (start.row, start.col)
    ]
    count = 0
    for row, col in candidates:
        blocked = copy.deepcopy(grid)
        blocked[row][col] = OBSTRUCTION
        if _loops(Room(blocked, copy.copy(start))):
            count += 1
    return count