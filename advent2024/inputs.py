"""Reading puzzle input files."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_INPUT = "input.txt"


def read_input(path: str | os.PathLike[str] = DEFAULT_INPUT) -> str:
    """Return the whole text of the puzzle input at *path*.

    Raises ``OSError`` (for example ``FileNotFoundError``) when the file
    cannot be read.
    """
    return Path(path).read_text(encoding="utf-8")