"""Parabolic reflector dish: rolling round rocks and measuring the load."""

import itertools
from collections.abc import Sequence
from enum import Enum


class Direction(Enum):
    """Directions in which the platform can be tilted."""

    NORTH = "north"
    WEST = "west"
    SOUTH = "south"
    EAST = "east"


def _columns(text: str) -> list[str]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("No lines in input")
    width = len(lines[0])
    if any(len(line) < width for line in lines):
        raise ValueError("No char at index: a line is shorter than the first")
    return ["".join(line[i] for line in lines) for i in range(width)]


def _roll_segment(segment: str) -> str:
    rocks = segment.count("O")
    if not rocks:
        return segment
    last = segment.rindex("O")
    return "O" * rocks + "." * (last + 1 - rocks) + segment[last + 1 :]


def _roll(column: str) -> str:
    """Roll every round rock towards the start of the column, stopping at '#'."""
    return "#".join(_roll_segment(segment) for segment in column.split("#"))


def _transpose(lines: list[str]) -> list[str]:
    if any(len(line) != len(lines) for line in lines):
        raise ValueError("Only square grids can be tilted west or east")
    return ["".join(chars) for chars in zip(*lines)]


def _reverse_each(lines: list[str]) -> list[str]:
    return [line[::-1] for line in lines]


def tilt(columns: Sequence, direction: Direction) -> list[str]:
    """Tilt a grid, given as its columns from top to bottom, and return the new columns."""
    columns = ["".join(column) for column in columns]
    if direction is Direction.NORTH:
        return [_roll(column) for column in columns]
    if direction is Direction.WEST:
        return _transpose([_roll(row) for row in _transpose(columns)])
    if direction is Direction.SOUTH:
        return _reverse_each([_roll(column) for column in _reverse_each(columns)])
    rolled = [_roll(row) for row in _reverse_each(_transpose(columns))]
    return _transpose(_reverse_each(rolled))


def spin_cycle(columns: Sequence) -> list[str]:
    """Tilt north, west, south and east in turn."""
    state = ["".join(column) for column in columns]
    for direction in (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST):
        state = tilt(state, direction)
    return state


def _load(columns: list[str]) -> int:
    return sum(
        len(column) - index
        for column in columns
        for index, char in enumerate(column)
        if char == "O"
    )


def part1(text: str) -> str:
    """Total load on the north beams after tilting north."""
    return str(_load(tilt(_columns(text), Direction.NORTH)))


def part2(text: str) -> str:
    """Load of the layout once spin cycles bring it back to where it started.

    Raises ValueError when the spin cycles settle into a loop that never
    contains the starting layout.
    """
    original = _columns(text)
    state = original
    seen: set[tuple[str, ...]] = set()
    for cycle in itertools.count(1):
        state = spin_cycle(state)
        if cycle > 1 and state == original:
            break
        key = tuple(state)
        if key in seen:
            raise ValueError("Spin cycles never return to the starting layout")
        seen.add(key)
    return str(_load(state))