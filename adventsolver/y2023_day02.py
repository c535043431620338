"""Games of coloured cubes drawn from a bag."""

import math

DIGITS = "0123456789"
BAG_LIMITS = {"red": 12, "green": 13, "blue": 14}

Draw = tuple[int, str]


def _parse_count(field: str) -> int:
    if not field or any(char not in DIGITS for char in field):
        raise ValueError(f"Item count is not a number: {field!r}")
    return int(field)


def parse_game(line: str) -> tuple[int, list[list[Draw]]]:
    """Split a game line into its number and its rounds of (count, colour) draws."""
    pieces = line.split(":")
    name = pieces[0]
    if len(pieces) < 2:
        raise ValueError(f"No rounds found in line: {line!r}")
    game_id = int("".join(char for char in name if char in DIGITS) or "0")

    rounds = []
    for round_text in pieces[1].split(";"):
        draws = []
        for item in round_text.split(","):
            fields = item.split()
            if not fields:
                raise ValueError(f"No item count found in {item!r}")
            count = _parse_count(fields[0])
            if len(fields) < 2:
                raise ValueError(f"No item name found in {item!r}")
            draws.append((count, fields[1]))
        rounds.append(draws)
    return game_id, rounds


def _check_colour(colour: str) -> None:
    if colour not in BAG_LIMITS:
        raise ValueError(f"Unknown item name: {colour!r}")


def _round_fits(draws: list[Draw]) -> bool:
    """Whether every draw of a round fits in a full bag; every colour is checked."""
    results = []
    for count, colour in draws:
        _check_colour(colour)
        results.append(count <= BAG_LIMITS[colour])
    return all(results)


def part1(text: str) -> int:
    """Sum the numbers of the games that are possible with the bag's contents."""
    total = 0
    for line in text.splitlines():
        game_id, rounds = parse_game(line)
        if all(_round_fits(draws) for draws in rounds):
            total += game_id
    return total


def part2(text: str) -> int:
    """Sum the powers of the smallest bag that makes each game possible."""
    total = 0
    for line in text.splitlines():
        _, rounds = parse_game(line)
        smallest = dict.fromkeys(BAG_LIMITS, 0)
        for draws in rounds:
            for count, colour in draws:
                _check_colour(colour)
                smallest[colour] = max(smallest[colour], count)
        total += math.prod(smallest.values())
    return total