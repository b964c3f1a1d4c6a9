"""Solvers for days 1 to 11 of a 2024 Advent-style puzzle calendar."""

__version__ = "0.1.0"