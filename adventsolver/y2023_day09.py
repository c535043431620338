"""Oasis report: extrapolating sequences through their differences."""

from collections.abc import Sequence


def extrapolate(sequence: Sequence[int]) -> int:
    """Predict the value that follows a sequence, using repeated differences."""
    if not sequence:
        raise ValueError("Cannot extrapolate an empty sequence")
    rows = [list(sequence)]
    while True:
        previous = rows[-1]
        difference = [b - a for a, b in zip(previous, previous[1:])]
        rows.append(difference)
        if all(value == 0 for value in difference):
            break
    return sum(row[-1] for row in rows[:-1])


def _sequences(text: str) -> list[list[int]]:
    return [[int(field) for field in line.split()] for line in text.splitlines()]


def part1(text: str) -> str:
    """Sum the next values of all sequences."""
    return str(sum(extrapolate(sequence) for sequence in _sequences(text)))


def part2(text: str) -> str:
    """Sum the values that come before each sequence."""
    return str(sum(extrapolate(sequence[::-1]) for sequence in _sequences(text)))