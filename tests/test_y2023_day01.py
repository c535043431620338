import pytest

from adventsolver.y2023_day01 import part1, part1_compact, part2

PART1_EXAMPLE = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"

PART2_EXAMPLE = "\n".join(
    [
        "two1nine",
        "eightwothree",
        "abcone2threexyz",
        "xtwone3four",
        "4nineeightseven2",
        "zoneight234",
        "7pqrstsixteen",
    ]
)


def test_part1_example():
    assert part1(PART1_EXAMPLE) == 142


def test_part1_compact_example():
    assert part1_compact(PART1_EXAMPLE) == 142


def test_part2_example():
    assert part2(PART2_EXAMPLE) == 281


def test_single_digit_is_doubled():
    assert part1("treb7uchet") == 77
    assert part1_compact("treb7uchet") == 77


def test_part1_line_without_digits_counts_zero():
    assert part1("abc\n12") == 12


def test_part1_compact_line_without_digits_raises():
    with pytest.raises(ValueError):
        part1_compact("abc\n12")


def test_leading_zero_handling_differs():
    assert part1("0a5") == 55
    assert part1_compact("0a5") == 5


@pytest.mark.parametrize(
    ("line", "expected"),
    [("eightwothree", 83), ("zoneight234", 14), ("oneight", 18), ("nine", 99)],
)
def test_part2_overlapping_words(line, expected):
    assert part2(line) == expected


def test_empty_input():
    assert part1("") == 0
    assert part2("") == 0