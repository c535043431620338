"""Ceres search: finding XMAS in a letter grid."""

from collections.abc import Iterator, Sequence

WORD_LENGTH = 4

# Step (row, column) of each reading direction.
_COLUMN_FORWARD = (1, 0)
_OTHER_DIRECTIONS = (
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)


def words(grid: Sequence[Sequence[str]]) -> Iterator[str]:
    """Yield every four-letter reading of the grid.

    Cells are visited column by column. The very first cell is read only
    downward; every other cell is read in all eight directions.
    """
    if not grid or not grid[0]:
        raise ValueError("Grid is empty")
    rows, cols = len(grid), len(grid[0])
    cells = ((x, y) for y in range(cols) for x in range(rows))
    for index, (x, y) in enumerate(cells):
        directions = (
            (_COLUMN_FORWARD,) if index == 0 else (*_OTHER_DIRECTIONS, _COLUMN_FORWARD)
        )
        for dx, dy in directions:
            end_x = x + (WORD_LENGTH - 1) * dx
            end_y = y + (WORD_LENGTH - 1) * dy
            if 0 <= end_x < rows and 0 <= end_y < cols:
                yield "".join(grid[x + i * dx][y + i * dy] for i in range(WORD_LENGTH))


def crosses(grid: Sequence[Sequence[str]]) -> Iterator[tuple[str, str]]:
    """Yield the two three-letter diagonals through every inner cell, column by column."""
    if not grid:
        raise ValueError("Grid is empty")
    rows, cols = len(grid), len(grid[0])
    for y in range(1, cols - 1):
        for x in range(1, rows - 1):
            centre = grid[x][y]
            diagonal = grid[x - 1][y - 1] + centre + grid[x + 1][y + 1]
            anti_diagonal = grid[x + 1][y - 1] + centre + grid[x - 1][y + 1]
            yield diagonal, anti_diagonal


def part1(text: str) -> str:
    """Count the readings of XMAS."""
    return str(sum(word == "XMAS" for word in words(text.splitlines())))


def part2(text: str) -> str:
    """Count the X shapes made of two diagonal MAS, each read either way."""
    wanted = {"MAS", "SAM"}
    return str(
        sum(
            first in wanted and second in wanted
            for first, second in crosses(text.splitlines())
        )
    )