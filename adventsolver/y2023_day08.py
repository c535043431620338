"""Haunted wasteland: following left/right instructions through a node network."""

import itertools
import math

Network = dict[str, tuple[str, str]]

_SIDES = {"L": 0, "R": 1}


def _parse_node(line: str) -> tuple[str, tuple[str, str]]:
    name, separator, targets = line.partition(" = ")
    if not separator:
        raise ValueError(f"Expected 'NAME = (LEFT, RIGHT)': {line!r}")
    if not (targets.startswith("(") and targets.endswith(")")):
        raise ValueError(f"Expected parenthesised targets: {line!r}")
    left, separator, right = targets[1:-1].partition(", ")
    if not separator:
        raise ValueError(f"Expected two targets: {line!r}")
    return name, (left, right)


def parse_network(text: str) -> tuple[list[str], Network]:
    """Read the instruction line and the map of nodes to their (left, right) targets.

    The line right after the instructions is a separator and is skipped.
    """
    lines = text.splitlines()
    if not lines:
        raise ValueError("No instructions in input")
    instructions = list(lines[0])
    for char in instructions:
        if char not in _SIDES:
            raise ValueError(f"Invalid direction: {char!r}")
    nodes: Network = {}
    for line in lines[2:]:
        name, targets = _parse_node(line)
        nodes.setdefault(name, targets)
    return instructions, nodes


def _step(nodes: Network, node: str, direction: str) -> str:
    target = nodes[node][_SIDES[direction]]
    if target not in nodes:
        raise ValueError(f"Unknown node: {target!r}")
    return target


def part1(text: str) -> str:
    """Count the steps from AAA to ZZZ.

    A missing AAA or ZZZ stands for the first node listed.
    """
    instructions, nodes = parse_network(text)
    if not nodes:
        raise ValueError("No nodes in input")
    first = next(iter(nodes))
    node = "AAA" if "AAA" in nodes else first
    destination = "ZZZ" if "ZZZ" in nodes else first
    if node == destination:
        return "0"
    if not instructions:
        raise ValueError("No instructions to follow")
    for steps, direction in enumerate(itertools.cycle(instructions), start=1):
        node = _step(nodes, node, direction)
        if node == destination:
            return str(steps)
    raise AssertionError("unreachable")


def part2(text: str) -> str:
    """Count the steps until every node ending in A stands on a node ending in Z.

    Each destination's first arrival step is recorded; once all have been
    reached, the answer is the least common multiple of those steps.
    """
    instructions, nodes = parse_network(text)
    current = [name for name in nodes if name.endswith("A")]
    destinations = {name for name in nodes if name.endswith("Z")}
    if all(name.endswith("Z") for name in current):
        return "0"
    if not instructions:
        raise ValueError("No instructions to follow")

    arrivals: dict[str, int] = {}
    for steps, direction in enumerate(itertools.cycle(instructions), start=1):
        current = [_step(nodes, name, direction) for name in current]
        for name in current:
            if name in destinations:
                arrivals.setdefault(name, steps)
        if len(arrivals) == len(destinations):
            return str(math.lcm(*arrivals.values()))
        if all(name.endswith("Z") for name in current):
            return str(steps)
    raise AssertionError("unreachable")