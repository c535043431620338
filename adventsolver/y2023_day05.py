"""Seed almanac: chains of range maps from seeds to locations."""

import itertools
from dataclasses import dataclass, field

Entry = tuple[int, int, int]


@dataclass
class RangeMap:
    """A list of (destination start, source start, length) ranges."""

    entries: list[Entry] = field(default_factory=list)

    def lookup(self, key: int) -> int:
        """Map a source value to its destination; unmapped values pass through."""
        for dest_start, source_start, length in self.entries:
            if source_start <= key < source_start + length:
                return dest_start + (key - source_start)
        return key

    def reverse_lookup(self, value: int) -> int:
        """Map a destination value back to its source, checking ranges last to first."""
        for dest_start, source_start, length in reversed(self.entries):
            if dest_start <= value < dest_start + length:
                return source_start + (value - dest_start)
        return value


@dataclass
class Almanac:
    """The maps that lead from a seed, in order, to a location."""

    maps: list[RangeMap] = field(default_factory=list)

    def location(self, seed: int) -> int:
        """Follow every map forward from a seed."""
        key = seed
        for range_map in self.maps:
            key = range_map.lookup(key)
        return key

    def seed(self, location: int) -> int:
        """Follow every map backward from a location."""
        key = location
        for range_map in reversed(self.maps):
            key = range_map.reverse_lookup(key)
        return key


def _parse_entry(line: str) -> Entry:
    numbers = [int(field) for field in line.split()]
    if len(numbers) < 3:
        raise ValueError(f"Map line needs three numbers: {line!r}")
    return numbers[0], numbers[1], numbers[2]


def parse_almanac(text: str) -> tuple[list[int], Almanac]:
    """Read the numbers on the seeds line and the almanac's maps."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("No input")
    seeds = [int(field) for field in lines[0].split(":")[-1].split()]

    maps = []
    for block in "\n".join(lines[1:]).split("\n\n"):
        entries = [_parse_entry(line) for line in block.strip().splitlines()[1:]]
        maps.append(RangeMap(entries))
    return seeds, Almanac(maps)


def part1(text: str) -> int:
    """Return the lowest location reached by any listed seed."""
    seeds, almanac = parse_almanac(text)
    if not seeds:
        raise ValueError("No seeds")
    return min(almanac.location(seed) for seed in seeds)


def part2(text: str) -> int:
    """Return the lowest location whose seed lies in one of the seed ranges."""
    numbers, almanac = parse_almanac(text)
    if len(numbers) % 2:
        raise ValueError("Seed ranges must come in pairs")
    ranges = [
        range(start, start + length)
        for start, length in zip(numbers[::2], numbers[1::2])
    ]
    if not any(ranges):
        raise ValueError("No seeds")
    return next(
        location
        for location in itertools.count()
        if any(almanac.seed(location) in seed_range for seed_range in ranges)
    )