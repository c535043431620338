"""Toy boat races: ways to beat the record distance."""

import bisect
import re

_NUMBER = re.compile(r"\+?[0-9]+")


def winning_ways(time: int, distance: int) -> int:
    """Count the hold times in 1..time whose travelled distance beats the record."""
    if time < 1:
        return 0
    if distance < 0:
        return time

    def travelled(hold: int) -> int:
        return (time - hold) * hold

    peak = max(1, time // 2)
    if travelled(peak) <= distance:
        return 0
    # travelled() rises from 1 up to the peak, so the first winner can be bisected.
    lowest = 1 + bisect.bisect_right(range(1, peak + 1), distance, key=travelled)
    return time - 2 * lowest + 1


def part1(text: str) -> int:
    """Multiply together the number of winning ways of every race."""
    rows = [
        [int(field) for field in line.split(":")[-1].split()]
        for line in text.splitlines()
    ]
    if len(rows) < 2:
        raise ValueError("Expected at least two lines")
    times, distances = rows[0], rows[1]
    product = 1
    for time, distance in zip(times, distances):
        product *= winning_ways(time, distance)
    return product


def _joined_number(line: str | None) -> int:
    if line is None:
        return 0
    digits = line.split(":")[-1].replace(" ", "")
    return int(digits) if _NUMBER.fullmatch(digits) else 0


def part2(text: str) -> int:
    """Count the winning ways of the single race formed by joining each line's digits."""
    lines = text.splitlines()
    time = _joined_number(lines[0] if lines else None)
    distance = _joined_number(lines[1] if len(lines) > 1 else None)
    return winning_ways(time, distance)