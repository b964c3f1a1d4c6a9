[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "0.1.0"
description = "Solvers for the first eleven days of a 2024 Advent-style puzzle calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent", "puzzles", "advent-of-code", "solutions", "2024"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2024 = "advent2024.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
