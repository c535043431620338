"""Red-nosed reports: checking that level sequences change safely."""

from collections.abc import Sequence


def _require_pair(levels: Sequence[int]) -> None:
    if len(levels) < 2:
        raise ValueError("A report needs at least two levels")


def _bad_step(previous: int, current: int, ascending: bool) -> bool:
    if not 1 <= abs(previous - current) <= 3:
        return True
    return (previous > current) == ascending


def is_safe(levels: Sequence[int]) -> bool:
    """Whether the levels keep the direction of the first step, changing by 1 to 3 each time."""
    _require_pair(levels)
    ascending = levels[0] < levels[1]
    return not any(
        _bad_step(previous, current, ascending)
        for previous, current in zip(levels, levels[1:])
    )


def _safe_skipping_one(levels: Sequence[int]) -> bool:
    """Scan once, forgiving the first bad level by keeping the one before it.

    A bad step at the very last pair is always forgiven.
    """
    ascending = levels[0] < levels[1]
    tolerated = False
    previous = levels[0]
    last_step = len(levels) - 2
    for step, current in enumerate(levels[1:]):
        if not _bad_step(previous, current, ascending):
            previous = current
            continue
        if tolerated:
            return False
        if step == last_step:
            return True
        tolerated = True
    return True


def is_safe_with_tolerance(levels: Sequence[int]) -> bool:
    """Whether the report is safe once one bad level is dropped, read forward or backward."""
    _require_pair(levels)
    levels = list(levels)
    return _safe_skipping_one(levels) or _safe_skipping_one(levels[::-1])


def _reports(text: str) -> list[list[int]]:
    return [[int(field) for field in line.split()] for line in text.splitlines()]


def part1(text: str) -> str:
    """Count the safe reports."""
    return str(sum(is_safe(levels) for levels in _reports(text)))


def part2(text: str) -> str:
    """Count the reports that are safe with one bad level tolerated."""
    return str(sum(is_safe_with_tolerance(levels) for levels in _reports(text)))