import pytest

from adventsolver.y2023_day04 import card_matches, part1, part2

EXAMPLE = "\n".join(
    [
        "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
        "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
        "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
        "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
        "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
        "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
    ]
)


def test_part1_example():
    assert part1(EXAMPLE) == 13


def test_part2_example():
    assert part2(EXAMPLE) == 30


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53", 4),
        ("Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83", 1),
        ("Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11", 0),
    ],
)
def test_card_matches(line, expected):
    assert card_matches(line) == expected


def test_card_without_separator_raises():
    with pytest.raises(ValueError):
        card_matches("Card 1: 1 2 3")


def test_card_with_bad_number_raises():
    with pytest.raises(ValueError):
        card_matches("Card 1: 1 x | 2")


def test_part1_no_matches_scores_zero():
    assert part1("Card 1: 1 2 | 3 4") == 0


def test_part2_last_card_may_win_one_extra_copy():
    assert part2("Card 1: 5 | 5") == 2


def test_part2_without_matches_counts_originals():
    assert part2("Card 1: 1 | 2\nCard 2: 3 | 4") == 2