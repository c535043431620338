"""Command line entry point: run one part of one puzzle on an input file."""

import argparse
import sys
from collections.abc import Callable

from adventsolver import (
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2023_day06,
    y2023_day07,
    y2023_day08,
    y2023_day09,
    y2023_day10,
    y2023_day13,
    y2023_day14,
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day11,
)

Solver = Callable[[str], object]

SOLVERS: dict[tuple[int, int], tuple[Solver, Solver]] = {
    (2023, 1): (y2023_day01.part1, y2023_day01.part2),
    (2023, 2): (y2023_day02.part1, y2023_day02.part2),
    (2023, 3): (y2023_day03.part1, y2023_day03.part2),
    (2023, 4): (y2023_day04.part1, y2023_day04.part2),
    (2023, 5): (y2023_day05.part1, y2023_day05.part2),
    (2023, 6): (y2023_day06.part1, y2023_day06.part2),
    (2023, 7): (y2023_day07.part1, y2023_day07.part2),
    (2023, 8): (y2023_day08.part1, y2023_day08.part2),
    (2023, 9): (y2023_day09.part1, y2023_day09.part2),
    (2023, 10): (y2023_day10.part1, y2023_day10.part2),
    (2023, 13): (y2023_day13.part1, y2023_day13.part1_mirror),
    (2023, 14): (y2023_day14.part1, y2023_day14.part2),
    (2024, 1): (y2024_day01.part1, y2024_day01.part2),
    (2024, 2): (y2024_day02.part1, y2024_day02.part2),
    (2024, 3): (y2024_day03.part1, y2024_day03.part2),
    (2024, 4): (y2024_day04.part1, y2024_day04.part2),
    (2024, 5): (y2024_day05.part1, y2024_day05.part2),
    (2024, 6): (y2024_day06.part1, y2024_day06.part2),
    (2024, 7): (y2024_day07.part1, y2024_day07.part2),
    (2024, 8): (y2024_day08.part1, y2024_day08.part2),
    (2024, 9): (y2024_day09.part1, y2024_day09.part2),
    (2024, 11): (y2024_day11.part1, y2024_day11.part2),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adventsolver", description="Solve one part of a puzzle."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument(
        "input", nargs="?", default="-", help="puzzle input file, '-' for stdin"
    )
    return parser


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """Run the chosen solver and print its answer; return the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    parts = SOLVERS.get((args.year, args.day))
    if parts is None:
        parser.error(f"no solver for {args.year} day {args.day}")
    solver = parts[args.part - 1]
    try:
        text = _read(args.input)
        answer = solver(text)
    except (OSError, ValueError) as error:
        print(f"adventsolver: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())