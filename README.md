# advent2024

Solvers for days 1 to 11 of a 2024 Advent-style puzzle calendar. Every
solver takes the puzzle input as plain text and returns the answer as an
integer. It needs nothing beyond the Python standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The `advent2024` command solves one part of one day:

```
advent2024 --help
advent2024 3 1
advent2024 3 1 --input my-input.txt
```

The positional arguments are the day (1 to 11) and the part (1 or 2). The
puzzle input is read from `input.txt` in the current directory unless
`-i`/`--input` names another file. The answer is printed on standard output
and the command exits with status 0. If the file cannot be read, the input is
malformed, or the day and part have no solver, a message goes to standard
error and the exit status is 1.

## Library use

Each day lives in its own module, `advent2024.day01` to `advent2024.day11`.

```python
from advent2024 import day01, day03, day11

left, right = [3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3]
day01.total_distance(left, right)      # 11
day01.similarity_score(left, right)    # 31

memory = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
day03.sum_multiplications(memory)      # 161

day11.count_stones("125 17", 25)       # 55312
```

The solvers the command uses:

| Day | Part 1                              | Part 2                                 |
|-----|-------------------------------------|----------------------------------------|
| 1   | `day01.total_distance`              | `day01.similarity_score`               |
| 2   | `day02.count_safe`                  | `day02.count_safe_dampened`            |
| 3   | `day03.sum_multiplications`         | `day03.sum_enabled_multiplications`    |
| 4   | `day04.count_xmas`                  | `day04.count_x_mas`                    |
| 5   | `day05.sum_ordered_middles`         | (none)                                 |
| 6   | `day06.count_visited`               | `day06.count_loop_positions`           |
| 7   | `day07.total_calibration`           | `day07.total_calibration`              |
| 8   | `day08.count_antinodes`             | `day08.count_resonant_antinodes`       |
| 9   | `day09.compact_blocks_checksum`     | `day09.compact_files_checksum`         |
| 10  | `day10.total_score`                 | `day10.total_rating`                   |
| 11  | `day11.count_stones`                | `day11.count_stones`                   |

Some solvers take parsed data rather than text; each of those days has a
parser: `day01.parse_columns`, `day02.parse_reports`, `day04.parse_grid`,
`day07.parse_equations` and `day10.parse_map`.

For day 7 the two parts differ in the operators passed to `total_calibration`
(`day07.BASIC_OPERATORS` or `day07.ALL_OPERATORS`, which adds `||`
concatenation); for day 11 they differ in the number of blinks (25 and 75).

`advent2024.cli.solve(day, part, text)` dispatches to the right solver and is
what the command uses. Input files are read with
`advent2024.inputs.read_input(path)`.

## Input formats

- Day 1: each line holds two whitespace-separated integers.
- Day 2: each line has the form `name = [7, 6, 4, 2, 1]`; lines without `=`
  are ignored.
- Day 5: `X|Y` ordering rules, a blank line, then one comma-separated update
  per line.
- The other days take the puzzle text as published.

## What it does not do

Day 5 part 2 (reordering the incorrectly ordered updates) is not solved;
`solve(5, 2, text)` and `advent2024 5 2` report that there is no solver.
The package does not download puzzle inputs or submit answers.