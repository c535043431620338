"""Guard gallivant: following a patrolling guard around a lab."""

from enum import Enum

Coord = tuple[int, int]


class Direction(Enum):
    """Facing directions, valued by their (x, y) step."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def turn_right(self) -> "Direction":
        """Return the direction a quarter turn clockwise."""
        return _RIGHT_TURNS[self]


_RIGHT_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


def _parse(text: str) -> tuple[list[str], Coord, set[Coord], Coord]:
    rows = text.splitlines()
    if not rows:
        raise ValueError("Map is empty")
    start = next(
        ((x, y) for y, row in enumerate(rows) for x, char in enumerate(row) if char == "^"),
        None,
    )
    if start is None:
        raise ValueError("No guard '^' on the map")
    walls = {
        (x, y) for y, row in enumerate(rows) for x, char in enumerate(row) if char == "#"
    }
    return rows, start, walls, (len(rows[0]), len(rows))


def _step(position: Coord, direction: Direction) -> Coord:
    dx, dy = direction.value
    return position[0] + dx, position[1] + dy


def _inside(position: Coord, size: Coord) -> bool:
    return 0 <= position[0] < size[0] and 0 <= position[1] < size[1]


def _patrol(start: Coord, walls: set[Coord], size: Coord) -> set[Coord]:
    """Return every cell the guard stands on before leaving the map."""
    position, direction = start, Direction.UP
    visited = {start}
    states = {(start, direction)}
    while True:
        ahead = _step(position, direction)
        if not _inside(ahead, size):
            return visited
        if ahead in walls:
            direction = direction.turn_right()
        else:
            position = ahead
            visited.add(position)
        state = (position, direction)
        if state in states:
            raise ValueError("The guard never leaves the map")
        states.add(state)


def _loops(start: Coord, walls: set[Coord], size: Coord) -> bool:
    """Whether the guard walks onto a cell again facing the same way."""
    position, direction = start, Direction.UP
    seen = {(position, direction)}
    turns = 0
    while True:
        ahead = _step(position, direction)
        if not _inside(ahead, size):
            return False
        if ahead in walls:
            direction = direction.turn_right()
            turns += 1
            if turns == 4:
                raise ValueError("The guard is boxed in")
            continue
        turns = 0
        position = ahead
        if (position, direction) in seen:
            return True
        seen.add((position, direction))


def part1(text: str) -> str:
    """Count the distinct cells the guard visits before leaving the map."""
    rows, start, walls, size = _parse(text)
    marked = {
        (x, y) for y, row in enumerate(rows) for x, char in enumerate(row) if char == "X"
    }
    return str(len(_patrol(start, walls, size) | marked))


def part2(text: str) -> str:
    """Count the cells where one new obstacle traps the guard in a loop."""
    rows, start, walls, (width, height) = _parse(text)
    count = 0
    for y in range(height):
        for x in range(width):
            if rows[y][x] == "#":
                continue
            if _loops(start, walls | {(x, y)}, (width, height)):
                count += 1
    return str(count)