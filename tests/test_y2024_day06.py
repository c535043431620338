import pytest

from adventsolver.y2024_day06 import Direction, part1, part2

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""


def test_part1_example():
    assert part1(EXAMPLE) == "41"


def test_part2_example():
    assert part2(EXAMPLE) == "6"


def test_turn_right_cycles_clockwise():
    assert Direction.UP.turn_right() is Direction.RIGHT
    assert Direction.RIGHT.turn_right() is Direction.DOWN
    assert Direction.DOWN.turn_right() is Direction.LEFT
    assert Direction.LEFT.turn_right() is Direction.UP


def test_four_turns_return_to_start():
    assert Direction.UP.turn_right().turn_right().turn_right().turn_right() is Direction.UP
    assert (
        Direction.RIGHT.turn_right().turn_right().turn_right().turn_right()
        is Direction.RIGHT
    )
    assert (
        Direction.DOWN.turn_right().turn_right().turn_right().turn_right()
        is Direction.DOWN
    )
    assert (
        Direction.LEFT.turn_right().turn_right().turn_right().turn_right()
        is Direction.LEFT
    )


def test_single_cell_guard():
    assert part1("^") == "1"
    assert part2("^") == "0"


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        part1("....\n.#..")


def test_guard_caught_in_loop_raises_for_part1():
    grid = ".#...\n....#\n#^...\n...#."
    with pytest.raises(ValueError):
        part1(grid)