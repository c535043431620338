import pytest

from adventsolver.y2023_day06 import part1, part2, winning_ways

EXAMPLE = """Time:      7  15   30
Distance:  9  40  200
"""


def test_part1_example():
    assert part1(EXAMPLE) == 288


def test_part2_example():
    assert part2(EXAMPLE) == 71503


@pytest.mark.parametrize("time, distance, ways", [(7, 9, 4), (15, 40, 8), (30, 200, 9)])
def test_winning_ways(time, distance, ways):
    assert winning_ways(time, distance) == ways


@pytest.mark.parametrize("time, distance", [(1, 0), (2, 0), (9, 3), (10, 24), (11, 30), (12, 36)])
def test_winning_ways_matches_counting(time, distance):
    counted = len([hold for hold in range(1, time + 1) if (time - hold) * hold > distance])
    assert winning_ways(time, distance) == counted


def test_unbeatable_record():
    assert winning_ways(4, 4) == 0
    assert winning_ways(0, 0) == 0


def test_part1_needs_two_lines():
    with pytest.raises(ValueError):
        part1("Time: 7\n")


def test_part2_unparsable_lines_default_to_zero():
    assert part2("Time: x\nDistance: 9\n") == 0