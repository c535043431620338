"""Calibration values hidden in lines of text."""

from collections.abc import Iterable, Iterator

DIGITS = "0123456789"
DIGIT_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _calibration(values: Iterable[int]) -> int:
    """Combine the first and last value of a line into a two-digit number.

    A zero seen while no first value is set yet does not count as the first value.
    """
    first = last = 0
    for value in values:
        if first == 0:
            first = value
        last = value
    return first * 10 + last


def part1(text: str) -> int:
    """Sum the calibration values built from the numeric digits of every line."""
    return sum(
        _calibration(int(char) for char in line if char in DIGITS)
        for line in text.splitlines()
    )


def part1_compact(text: str) -> int:
    """Sum the numbers formed by the first and last digit of every line.

    Raises ValueError for a line that holds no digit.
    """
    total = 0
    for line in text.splitlines():
        digits = [char for char in line if char in DIGITS]
        if not digits:
            raise ValueError(f"No first digit in line: {line!r}")
        total += int(digits[0] + digits[-1])
    return total


def _spelled_digits(line: str) -> Iterator[int]:
    """Yield every digit of a line, written either as a numeral or as a word."""
    for start, char in enumerate(line):
        if char in DIGITS:
            yield int(char)
            continue
        for value, word in enumerate(DIGIT_WORDS, start=1):
            if line.startswith(word, start):
                yield value
                break


def part2(text: str) -> int:
    """Sum the calibration values where digits may also be spelled out."""
    return sum(_calibration(_spelled_digits(line)) for line in text.splitlines())