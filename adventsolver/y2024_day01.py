"""Historian hysteria: comparing two lists of location IDs."""

from collections import Counter


def _lists(text: str) -> tuple[list[int], list[int]]:
    first: list[int] = []
    second: list[int] = []
    for line in text.splitlines():
        parts = line.split()
        if len(parts) < 2:
            raise ValueError(f"Expected two numbers on line: {line!r}")
        first.append(int(parts[0]))
        second.append(int(parts[1]))
    return first, second


def part1(text: str) -> str:
    """Total distance between the two lists once both are sorted."""
    first, second = _lists(text)
    return str(sum(abs(a - b) for a, b in zip(sorted(first), sorted(second))))


def part2(text: str) -> str:
    """Similarity score: each left number times its count in the right list."""
    first, second = _lists(text)
    counts = Counter(second)
    return str(sum(a * counts[a] for a in first))