"""Bridge repair: operators that make calibration equations true."""

import itertools
import re
from collections.abc import Iterator, Sequence

ADD, MULTIPLY, CONCATENATE = 0, 1, 2

_INTEGER = re.compile(r"[+-]?[0-9]+")


def operator_combinations(n_ops: int, n_kinds: int) -> Iterator[list[int]]:
    """Yield every choice of ``n_ops`` operators, the first operator varying fastest."""
    for combo in itertools.product(range(n_kinds), repeat=n_ops):
        yield list(reversed(combo))


def _evaluate(numbers: Sequence[int], ops: Sequence[int], target: int) -> int:
    """Apply operators left to right; 0 once the running value overshoots."""
    result = numbers[0]
    target_digits = len(str(target))
    for op, number in zip(ops, numbers[1:]):
        if result > target:
            return 0
        if op == ADD:
            result += number
        elif op == MULTIPLY:
            result *= number
        elif len(str(result)) + len(str(number)) <= target_digits:
            result = int(f"{result}{number}")
        else:
            return 0
    return result


def _solve(target: int, numbers: Sequence[int], n_kinds: int) -> int:
    if not numbers:
        raise ValueError("An equation needs at least one number")
    for ops in operator_combinations(len(numbers) - 1, n_kinds):
        if _evaluate(numbers, ops, target) == target:
            return target
    return 0


def check(target: int, numbers: Sequence[int]) -> int:
    """Return the target if adding and multiplying can reach it, else 0."""
    return _solve(target, numbers, 2)


def check_with_concat(target: int, numbers: Sequence[int]) -> int:
    """Return the target if adding, multiplying and concatenating can reach it, else 0."""
    return _solve(target, numbers, 3)


def _parse_int(field: str) -> int:
    if not _INTEGER.fullmatch(field):
        raise ValueError(f"Not a number: {field!r}")
    return int(field)


def _equations(text: str) -> Iterator[tuple[int, list[int]]]:
    for line in text.splitlines():
        parts = line.split(": ")
        if len(parts) < 2:
            raise ValueError(f"Expected 'TARGET: NUMBERS': {line!r}")
        yield _parse_int(parts[0]), [_parse_int(field) for field in parts[1].split(" ")]


def part1(text: str) -> str:
    """Sum the targets reachable with addition and multiplication."""
    return str(sum(check(target, numbers) for target, numbers in _equations(text)))


def part2(text: str) -> str:
    """Sum the targets reachable once concatenation is allowed too."""
    total = 0
    for target, numbers in _equations(text):
        if check(target, numbers) == 0:
            total += check_with_concat(target, numbers)
        else:
            total += target
    return str(total)