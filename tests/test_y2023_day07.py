import pytest

from adventsolver.y2023_day07 import HandType, hand_type, part1, part2

EXAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


def test_part1_example():
    assert part1(EXAMPLE) == "6440"


def test_part2_example():
    assert part2(EXAMPLE) == "5905"


@pytest.mark.parametrize(
    "cards, jokers, expected",
    [
        ("32T3K", False, HandType.ONE_PAIR),
        ("KK677", False, HandType.TWO_PAIRS),
        ("KTJJT", False, HandType.TWO_PAIRS),
        ("T55J5", False, HandType.THREE_OF_A_KIND),
        ("23332", False, HandType.FULL_HOUSE),
        ("AA8AA", False, HandType.FOUR_OF_A_KIND),
        ("AAAAA", False, HandType.FIVE_OF_A_KIND),
        ("23456", False, HandType.HIGH_CARD),
        ("KTJJT", True, HandType.FOUR_OF_A_KIND),
        ("T55J5", True, HandType.FOUR_OF_A_KIND),
        ("JJJJJ", True, HandType.FIVE_OF_A_KIND),
        ("2345J", True, HandType.ONE_PAIR),
    ],
)
def test_hand_type(cards, jokers, expected):
    assert hand_type(cards, jokers) is expected


def test_hand_types_are_ordered():
    high_card = hand_type("23456", False)
    one_pair = hand_type("32T3K", False)
    five_of_a_kind = hand_type("AAAAA", False)
    assert high_card < one_pair < five_of_a_kind


def test_invalid_card_raises():
    with pytest.raises(ValueError):
        hand_type("2345X", False)


def test_wrong_hand_size_raises():
    with pytest.raises(ValueError):
        hand_type("2345", False)


def test_card_order_breaks_ties():
    # Both are four of a kind; the hand with the stronger first card wins.
    text = "JKKK2 1\nQQQQ2 2\n"
    assert part1(text) == str(1 * 1 + 2 * 2)
    assert part2(text) == str(1 * 1 + 2 * 2)