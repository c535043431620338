"""Part numbers and gears in an engine schematic."""

import math
from collections.abc import Iterator

DIGITS = "0123456789"

Coord = tuple[int, int]


class Schematic:
    """A rectangular grid of characters, addressed by (x, y)."""

    def __init__(self, text: str) -> None:
        rows = text.splitlines()
        if not rows:
            raise ValueError("Schematic is empty")
        self.rows = rows
        self.length = len(rows)
        self.width = len(rows[0])

    def adjacent(self, x: int, y: int) -> list[tuple[Coord, str]]:
        """Return the in-bounds neighbours of a cell, diagonals included."""
        left = x > 0
        right = x < self.width - 1
        up = y > 0
        down = y < self.length - 1
        candidates = [
            (left, (x - 1, y)),
            (right, (x + 1, y)),
            (up, (x, y - 1)),
            (down, (x, y + 1)),
            (left and up, (x - 1, y - 1)),
            (left and down, (x - 1, y + 1)),
            (right and up, (x + 1, y - 1)),
            (right and down, (x + 1, y + 1)),
        ]
        return [((ax, ay), self.rows[ay][ax]) for ok, (ax, ay) in candidates if ok]


def _numbers(schematic: Schematic) -> Iterator[tuple[int, list[Coord]]]:
    """Yield each number of the schematic with the cells its digits occupy."""
    for y, row in enumerate(schematic.rows):
        number = 0
        cells: list[Coord] = []
        last = len(row) - 1
        for x, char in enumerate(row):
            is_digit = char in DIGITS
            if is_digit:
                number = number * 10 + int(char)
                cells.append((x, y))
            if not is_digit or x == last:
                if cells:
                    yield number, cells
                number = 0
                cells = []


def _is_symbol(char: str) -> bool:
    return char != "." and char not in DIGITS


def part1(text: str) -> int:
    """Sum the numbers that touch a symbol."""
    schematic = Schematic(text)
    return sum(
        number
        for number, cells in _numbers(schematic)
        if any(
            _is_symbol(char)
            for cell in cells
            for _, char in schematic.adjacent(*cell)
        )
    )


def part2(text: str) -> int:
    """Sum the products of the numbers around every '*' touched by more than one."""
    schematic = Schematic(text)
    gears: dict[Coord, list[int]] = {}
    for number, cells in _numbers(schematic):
        gear = next(
            (
                position
                for cell in cells
                for position, char in schematic.adjacent(*cell)
                if char == "*"
            ),
            None,
        )
        if gear is not None:
            gears.setdefault(gear, []).append(number)
    return sum(math.prod(parts) for parts in gears.values() if len(parts) > 1)