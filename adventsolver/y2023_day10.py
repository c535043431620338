"""Pipe maze: the point of a closed loop farthest from its start."""

from collections import deque
from collections.abc import Callable
from enum import Enum
from typing import Optional

Coord = tuple[int, int]


class Pipe(Enum):
    """Pipe pieces, named by the directions they join."""

    VERTICAL = "|"
    HORIZONTAL = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"


Tile = Optional[Pipe]

_V = Pipe.VERTICAL
_H = Pipe.HORIZONTAL
_NE = Pipe.NORTH_EAST
_NW = Pipe.NORTH_WEST
_SW = Pipe.SOUTH_WEST
_SE = Pipe.SOUTH_EAST

# Whether the second pipe, lying at (x2, y2), continues the first at (x1, y1).
_CONNECTIONS: dict[tuple[Pipe, Pipe], Callable[[int, int, int, int], bool]] = {
    (_V, _V): lambda x1, y1, x2, y2: x1 == x2,
    (_V, _NE): lambda x1, y1, x2, y2: x1 == x2 and y1 < y2,
    (_V, _NW): lambda x1, y1, x2, y2: x1 == x2 and y1 < y2,
    (_V, _SW): lambda x1, y1, x2, y2: x1 == x2 and y1 > y2,
    (_V, _SE): lambda x1, y1, x2, y2: x1 == x2 and y1 > y2,
    (_H, _H): lambda x1, y1, x2, y2: y1 == y2,
    (_H, _NE): lambda x1, y1, x2, y2: y1 == y2 and x1 > x2,
    (_H, _NW): lambda x1, y1, x2, y2: y1 == y2 and x1 < x2,
    (_H, _SW): lambda x1, y1, x2, y2: y1 == y2 and x1 < x2,
    (_H, _SE): lambda x1, y1, x2, y2: y1 == y2 and x1 > x2,
    (_NE, _SW): lambda x1, y1, x2, y2: (x1 == x2 and y1 > y2) or (y1 == y2 and x1 < x2),
    (_NE, _SE): lambda x1, y1, x2, y2: (x1 == x2 and y1 > y2) or (y1 == y2 and x1 > x2),
    (_NE, _NW): lambda x1, y1, x2, y2: y1 == y2 and x1 < x2,
    (_NW, _SW): lambda x1, y1, x2, y2: (x1 == x2 and y1 > y2) or (y1 == y2 and x1 < x2),
    (_NW, _SE): lambda x1, y1, x2, y2: (x1 == x2 and y1 > y2) or (y1 == y2 and x1 > x2),
    (_SW, _SE): lambda x1, y1, x2, y2: y1 == y2 and x1 > x2,
}


class Grid:
    """Tiles addressed by (x, y), with the start tile replaced by the pipe that fits it."""

    def __init__(self, tiles: list[list[Tile]], start: Coord) -> None:
        self.tiles = [list(row) for row in tiles]
        if not self.tiles:
            raise ValueError("Grid is empty")
        self.start = start
        x, y = start
        self._tile(x, y)
        self.tiles[y][x] = self._start_pipe()

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.tiles) and 0 <= x < len(self.tiles[y])

    def _tile(self, x: int, y: int) -> Tile:
        if not self._in_bounds(x, y):
            raise IndexError(f"No tile at {(x, y)}")
        return self.tiles[y][x]

    def neighbors(self, x: int, y: int) -> list[tuple[Tile, Coord]]:
        """Return the in-bounds tiles above, below, left and right, in that order."""
        candidates = [(x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)]
        return [
            (self.tiles[ny][nx], (nx, ny))
            for nx, ny in candidates
            if self._in_bounds(nx, ny)
        ]

    def is_connected(self, first: Coord, second: Coord) -> bool:
        """Whether the pipe at ``second`` continues the pipe at ``first``."""
        tile1 = self._tile(*first)
        tile2 = self._tile(*second)
        if tile1 is None or tile2 is None:
            return False
        rule = _CONNECTIONS.get((tile1, tile2))
        return rule is not None and rule(*first, *second)

    def _start_pipe(self) -> Pipe:
        x, y = self.start
        around = [coord for _, coord in self.neighbors(x, y)]
        for pipe in Pipe:
            self.tiles[y][x] = pipe
            connected = sum(
                self.is_connected(self.start, coord) or self.is_connected(coord, self.start)
                for coord in around
            )
            if connected == 2:
                return pipe
        raise ValueError("No suitable start pipe found")


def _parse_tile(char: str) -> Tile:
    if char in ".S":
        return None
    try:
        return Pipe(char)
    except ValueError:
        raise ValueError(f"Invalid character: {char!r}") from None


def parse_grid(text: str) -> Grid:
    """Build a grid from text; the last 'S' marks the start, (0, 0) if there is none."""
    start = (0, 0)
    tiles = []
    for y, line in enumerate(text.splitlines()):
        row = []
        for x, char in enumerate(line):
            row.append(_parse_tile(char))
            if char == "S":
                start = (x, y)
        tiles.append(row)
    return Grid(tiles, start)


def _farthest_distance(grid: Grid) -> int:
    distances = {grid.start: 0}
    frontier = deque([grid.start])
    while frontier:
        coord = frontier.popleft()
        for tile, neighbor in grid.neighbors(*coord):
            if tile is None or neighbor in distances:
                continue
            if not (grid.is_connected(coord, neighbor) or grid.is_connected(neighbor, coord)):
                continue
            distances[neighbor] = distances[coord] + 1
            frontier.append(neighbor)
    return max(distances.values())


def part1(text: str) -> str:
    """Return the number of steps to the loop tile farthest from the start."""
    return str(_farthest_distance(parse_grid(text)))


def part2(text: str) -> str:
    """Return the number of steps to the loop tile farthest from the start."""
    return str(_farthest_distance(parse_grid(text)))