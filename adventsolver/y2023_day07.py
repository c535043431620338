"""Camel Cards: ranking poker-like hands and summing winnings."""

from collections import Counter
from enum import IntEnum

PLAIN_ORDER = "23456789TJQKA"
JOKER_ORDER = "J23456789TQKA"


class HandType(IntEnum):
    """Hand strengths, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


_PATTERNS = {
    (1, 1, 1, 1, 1): HandType.HIGH_CARD,
    (1, 1, 1, 2): HandType.ONE_PAIR,
    (1, 2, 2): HandType.TWO_PAIRS,
    (1, 1, 3): HandType.THREE_OF_A_KIND,
    (2, 3): HandType.FULL_HOUSE,
    (1, 4): HandType.FOUR_OF_A_KIND,
    (5,): HandType.FIVE_OF_A_KIND,
}


def hand_type(cards: str, jokers: bool) -> HandType:
    """Classify a hand; with jokers, every J joins the largest group of cards."""
    order = JOKER_ORDER if jokers else PLAIN_ORDER
    if any(card not in order for card in cards):
        raise ValueError(f"Invalid card in hand: {cards!r}")
    joker_count = cards.count("J") if jokers else 0
    counts = sorted(Counter(c for c in cards if not (jokers and c == "J")).values())
    if counts:
        counts[-1] += joker_count
    else:
        counts.append(joker_count)
    try:
        return _PATTERNS[tuple(counts)]
    except KeyError:
        raise ValueError(f"Invalid hand: {cards!r}") from None


def _winnings(text: str, jokers: bool) -> int:
    order = JOKER_ORDER if jokers else PLAIN_ORDER
    hands = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"Expected cards and a bid: {line!r}")
        cards, bid = fields[0], int(fields[1])
        strength = (hand_type(cards, jokers), [order.index(card) for card in cards])
        hands.append((strength, bid))
    hands.sort(key=lambda hand: hand[0])
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, start=1))


def part1(text: str) -> str:
    """Total winnings with J as a jack."""
    return str(_winnings(text, jokers=False))


def part2(text: str) -> str:
    """Total winnings with J as the weakest card and a wildcard."""
    return str(_winnings(text, jokers=True))