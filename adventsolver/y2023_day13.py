"""Point of incidence: lines of reflection in patterns of ash and rock."""

from collections.abc import Sequence
from typing import Optional

_CELLS = "#."


def _check_cells(line: str) -> None:
    for char in line:
        if char not in _CELLS:
            raise ValueError(f"Invalid character: {char!r}")


def _reflection_line(rows: Sequence) -> Optional[int]:
    """Guess a reflection line from the rows matching the first or the last row."""
    if not rows:
        raise ValueError("Pattern has no rows")
    first = rows[0]
    for index in range(len(rows) - 1, 0, -1):
        if rows[index] == first:
            return (index + 1) // 2
    last = rows[-1]
    for index in range(len(rows) - 1):
        if rows[index] == last:
            return (len(rows) - index) // 2 + index
    return None


def find_reflection(rows: Sequence) -> Optional[int]:
    """Return the number of rows above a reflection line.

    Returns None when no candidate line exists, and 0 when the candidate
    line turns out not to mirror the rows around it.
    """
    line = _reflection_line(rows)
    if line is None:
        return None
    valid = all(
        rows[i] == rows[2 * line - i - 1]
        for i in range(line)
        if 2 * line - i - 1 < len(rows)
    )
    return line if valid else 0


def is_mirror(index: int, rows: Sequence) -> bool:
    """Whether the rows mirror each other around the line before ``index``."""
    if not 0 <= index <= len(rows):
        raise ValueError(f"Line {index} lies outside {len(rows)} rows")
    return all(
        rows[index - offset - 1] == rows[index + offset]
        for offset in range(min(index, len(rows) - index))
    )


def _transpose(rows: list[str]) -> list[str]:
    if not rows:
        raise ValueError("Pattern has no rows")
    width = len(rows[0])
    if any(len(row) < width for row in rows):
        raise ValueError("Pattern rows are shorter than the first row")
    return ["".join(row[i] for row in rows) for i in range(width)]


def part1(text: str) -> str:
    """Summarise the patterns: 100 per row above a horizontal line, 1 per column left of a vertical one."""
    total = 0
    for block in text.split("\n\n"):
        rows = block.splitlines()
        for row in rows:
            _check_cells(row)
        columns = _transpose(rows)
        horizontal = find_reflection(rows)
        if horizontal is not None:
            total += horizontal * 100
            continue
        vertical = find_reflection(columns)
        if vertical is None:
            raise ValueError("No reflection found")
        total += vertical
    return str(total)


def part1_mirror(text: str) -> int:
    """Summarise the patterns using the first exact mirror line in each direction."""
    total = 0
    for block in text.rstrip().split("\n\n"):
        rows = block.split()
        for row in rows:
            _check_cells(row)
        columns = _transpose(rows)
        horizontal = next((i for i in range(1, len(rows)) if is_mirror(i, rows)), 0)
        vertical = next((i for i in range(1, len(columns)) if is_mirror(i, columns)), 0)
        total += 100 * horizontal + vertical
    return total