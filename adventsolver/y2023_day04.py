"""Scratchcards and their winning numbers."""


def card_matches(line: str) -> int:
    """Count how many of a card's numbers appear among its winning numbers."""
    numbers = line.split(":")[-1]
    parts = numbers.split("|")
    if len(parts) < 2:
        raise ValueError(f"No '|' separator in card: {line!r}")
    winning = {int(field) for field in parts[0].split()}
    return sum(int(field) in winning for field in parts[1].split())


def part1(text: str) -> int:
    """Sum the points of all cards: one for the first match, doubled for each more."""
    total = 0
    for line in text.splitlines():
        matches = card_matches(line)
        if matches:
            total += 2 ** (matches - 1)
    return total


def part2(text: str) -> int:
    """Count the scratchcards held once every won copy has been processed."""
    lines = text.splitlines()
    copies = [0] * (len(lines) + 1)
    for index, line in enumerate(lines):
        copies[index] += 1
        matches = card_matches(line)
        for won in range(index + 1, min(index + 1 + matches, len(lines) + 1)):
            copies[won] += copies[index]
    return sum(copies)