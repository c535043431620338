import pytest

from adventsolver.y2023_day08 import parse_network, part1, part2

FIRST_EXAMPLE = "\n".join(
    [
        "RL",
        "",
        "AAA = (BBB, CCC)",
        "BBB = (DDD, EEE)",
        "CCC = (ZZZ, GGG)",
        "DDD = (DDD, DDD)",
        "EEE = (EEE, EEE)",
        "GGG = (GGG, GGG)",
        "ZZZ = (ZZZ, ZZZ)",
    ]
)

SECOND_EXAMPLE = "\n".join(
    [
        "LLR",
        "",
        "AAA = (BBB, BBB)",
        "BBB = (AAA, ZZZ)",
        "ZZZ = (ZZZ, ZZZ)",
    ]
)

GHOST_EXAMPLE = "\n".join(
    [
        "LR",
        "",
        "11A = (11B, XXX)",
        "11B = (XXX, 11Z)",
        "11Z = (11B, XXX)",
        "22A = (22B, XXX)",
        "22B = (22C, 22C)",
        "22C = (22Z, 22Z)",
        "22Z = (22B, 22B)",
        "XXX = (XXX, XXX)",
    ]
)


def test_parse_network():
    instructions, nodes = parse_network(SECOND_EXAMPLE)
    assert instructions == ["L", "L", "R"]
    assert nodes == {
        "AAA": ("BBB", "BBB"),
        "BBB": ("AAA", "ZZZ"),
        "ZZZ": ("ZZZ", "ZZZ"),
    }


def test_part1_first_example():
    assert part1(FIRST_EXAMPLE) == "2"


def test_part1_second_example():
    assert part1(SECOND_EXAMPLE) == "6"


def test_part2_example():
    assert part2(GHOST_EXAMPLE) == "6"


def test_part2_without_start_nodes():
    assert part2("LR\n\nBBB = (BBB, BBB)") == "0"


def test_invalid_direction():
    with pytest.raises(ValueError):
        parse_network("LXR\n\nAAA = (AAA, AAA)")


def test_malformed_node_line():
    with pytest.raises(ValueError):
        parse_network("LR\n\nAAA -> BBB")


def test_empty_input():
    with pytest.raises(ValueError):
        part1("")


def test_unknown_target_node():
    with pytest.raises(ValueError):
        part1("L\n\nAAA = (QQQ, QQQ)\nZZZ = (ZZZ, ZZZ)")