import pytest

from adventsolver.y2023_day09 import extrapolate, part1, part2

EXAMPLE = "\n".join(
    [
        "0 3 6 9 12 15",
        "1 3 6 10 15 21",
        "10 13 16 21 30 45",
    ]
)


@pytest.mark.parametrize(
    ("sequence", "expected"),
    [
        ([0, 3, 6, 9, 12, 15], 18),
        ([1, 3, 6, 10, 15, 21], 28),
        ([10, 13, 16, 21, 30, 45], 68),
        ([5], 5),
        ([7, 7, 7], 7),
    ],
)
def test_extrapolate(sequence, expected):
    assert extrapolate(sequence) == expected


def test_extrapolate_backwards_via_reversal():
    assert extrapolate([45, 30, 21, 16, 13, 10]) == 5


def test_extrapolate_empty():
    with pytest.raises(ValueError):
        extrapolate([])


def test_part1_example():
    assert part1(EXAMPLE) == "114"


def test_part2_example():
    assert part2(EXAMPLE) == "2"


def test_part1_rejects_blank_line():
    with pytest.raises(ValueError):
        part1("1 2 3\n\n4 5 6")