"""Resonant collinearity: antinodes of antennas sharing a frequency."""

import itertools
from collections.abc import Iterator, Sequence

Coord = tuple[int, int]


def _inside(position: Coord, size: Coord) -> bool:
    return 0 <= position[0] < size[0] and 0 <= position[1] < size[1]


def _pairs(antennas: Sequence[Coord]) -> Iterator[tuple[Coord, Coord, int, int]]:
    for (x1, y1), (x2, y2) in itertools.combinations(antennas, 2):
        yield (x1, y1), (x2, y2), x2 - x1, y2 - y1


def antinodes(antennas: Sequence[Coord], size: Coord) -> set[Coord]:
    """Points one pair-distance beyond either antenna of each pair, within the map."""
    found: set[Coord] = set()
    for (x1, y1), (x2, y2), dx, dy in _pairs(antennas):
        for point in ((x1 - dx, y1 - dy), (x2 + dx, y2 + dy)):
            if _inside(point, size):
                found.add(point)
    return found


def _ray(start: Coord, dx: int, dy: int, size: Coord) -> Iterator[Coord]:
    for k in itertools.count():
        point = (start[0] + k * dx, start[1] + k * dy)
        if not _inside(point, size):
            return
        yield point


def resonant_antinodes(antennas: Sequence[Coord], size: Coord) -> set[Coord]:
    """Every in-map point on the line of each pair, at whole multiples of their distance."""
    found: set[Coord] = set()
    for first, second, dx, dy in _pairs(antennas):
        if dx == 0 and dy == 0:
            if _inside(first, size):
                found.add(first)
            continue
        found.update(_ray(first, -dx, -dy, size))
        found.update(_ray(second, dx, dy, size))
    return found


def _antennas(text: str) -> tuple[dict[str, list[Coord]], Coord]:
    rows = text.splitlines()
    if not rows:
        raise ValueError("Map is empty")
    groups: dict[str, list[Coord]] = {}
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char != ".":
                groups.setdefault(char, []).append((x, y))
    return groups, (len(rows[0]), len(rows))


def part1(text: str) -> str:
    """Count the distinct antinode locations."""
    groups, size = _antennas(text)
    found: set[Coord] = set()
    for coords in groups.values():
        found |= antinodes(coords, size)
    return str(len(found))


def part2(text: str) -> str:
    """Count the distinct antinode locations once resonance is accounted for."""
    groups, size = _antennas(text)
    found: set[Coord] = set()
    for coords in groups.values():
        found |= resonant_antinodes(coords, size)
    return str(len(found))