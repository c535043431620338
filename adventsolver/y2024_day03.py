"""Mull it over: multiplications hidden in corrupted memory."""

import re

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|do\(\)|don't\(\)")


def part1(text: str) -> str:
    """Sum the products of every well-formed mul(a,b)."""
    return str(sum(int(a) * int(b) for a, b in _MUL.findall(text)))


def part2(text: str) -> str:
    """Sum the products of mul(a,b) while enabled; don't() disables and do() enables."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return str(total)