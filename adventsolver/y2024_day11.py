"""Stones that change every time you blink."""

from collections import Counter


def _change(stone: int) -> list[int]:
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * 2024]


def blink(stones: list[int]) -> list[int]:
    """Apply one blink to a row of stones, keeping their order."""
    return [new for stone in stones for new in _change(stone)]


def blink_counts(counts: dict[int, int]) -> Counter[int]:
    """Apply one blink to stones tallied by engraved number."""
    result: Counter[int] = Counter()
    for stone, count in counts.items():
        for new in _change(stone):
            result[new] += count
    return result


def _stones(text: str) -> list[int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("No stones in input")
    return [int(field) for field in lines[0].split()]


def part1(text: str) -> str:
    """Count the stones after 25 blinks."""
    stones = _stones(text)
    for _ in range(25):
        stones = blink(stones)
    return str(len(stones))


def part2(text: str) -> str:
    """Count the stones after 75 blinks."""
    counts: Counter[int] = Counter(_stones(text))
    for _ in range(75):
        counts = blink_counts(counts)
    return str(sum(counts.values()))