# adventsolver

Solutions to a selection of Advent of Code puzzles from 2023 and 2024.
Each puzzle day is a module with functions that take the puzzle input
as text and return the answer. It needs nothing beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from pathlib import Path

from adventsolver import y2023_day01, y2024_day11

text = Path("input.txt").read_text()
print(y2023_day01.part1(text))
print(y2023_day01.part2(text))
print(y2024_day11.part2(text))
```

Some solvers return an `int`, others the answer as a `str`.
Malformed input raises `ValueError`.

Available modules:

| Year | Modules |
|------|---------|
| 2023 | `y2023_day01` … `y2023_day10`, `y2023_day13`, `y2023_day14` |
| 2024 | `y2024_day01` … `y2024_day09`, `y2024_day11` |

Every module has `part1(text)`. All have `part2(text)` except
`y2023_day13`, which instead offers `part1_mirror(text)`, a second way of
computing its first part. `y2023_day01` also has `part1_compact(text)`,
which raises `ValueError` for a line without a digit.

Many modules expose the building blocks they use, for example:

- `y2023_day05.parse_almanac(text)`, with `RangeMap` and `Almanac`
- `y2023_day06.winning_ways(time, distance)`
- `y2023_day07.hand_type(cards, jokers)` and the `HandType` enum
- `y2023_day09.extrapolate(sequence)`
- `y2023_day10.parse_grid(text)` and `Grid`
- `y2023_day14.tilt(columns, direction)` and `spin_cycle(columns)`
- `y2024_day02.is_safe(levels)` and `is_safe_with_tolerance(levels)`
- `y2024_day05.is_ordered(update, rules)` and `reorder(update, rules)`
- `y2024_day07.check(target, numbers)` and `check_with_concat(target, numbers)`
- `y2024_day09.layout(disk_map)`, `compact_blocks(blocks)` and `compact_files(blocks)`
- `y2024_day11.blink(stones)` and `blink_counts(counts)`

## Command line

Installing the package provides the `adventsolver` command:

```
adventsolver YEAR DAY PART [INPUT]
```

`PART` is 1 or 2. `INPUT` is the path of the puzzle input; leave it out
or give `-` to read from standard input. The answer is printed on
standard output. If the file cannot be read or the input is malformed,
the error goes to standard error and the exit status is 1; an unknown
year and day is reported as a usage error.

```
adventsolver 2024 1 2 input.txt
adventsolver 2023 6 1 < input.txt
```

For 2023 day 13, part 2 runs `y2023_day13.part1_mirror`. For 2023 day 10,
parts 1 and 2 both give the distance to the farthest loop tile.

## What it does not do

- It does not download puzzle inputs; you supply the text.
- Only the days listed above are covered. 2023 day 13 has no solution
  for its second part, and 2023 day 10 has no separate second-part
  answer.