"""Print queue: page ordering rules and the updates that follow them."""

from collections.abc import Sequence

Rule = tuple[int, int]


def parse_manual(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Split the input into ordering rules ``a|b`` and comma-separated updates."""
    rules_text, separator, updates_text = text.partition("\n\n")
    if not separator:
        raise ValueError("Expected a blank line between rules and updates")
    rules = []
    for line in rules_text.splitlines():
        before, bar, after = line.partition("|")
        if not bar:
            raise ValueError(f"Expected a rule 'a|b': {line!r}")
        rules.append((int(before), int(after)))
    updates = [
        [int(page) for page in line.split(",")] for line in updates_text.splitlines()
    ]
    return rules, updates


def is_ordered(update: Sequence[int], rules: Sequence[Rule]) -> bool:
    """Whether every rule whose pages both appear is respected by the update."""
    for before, after in rules:
        if before in update and after in update:
            if update.index(before) > update.index(after):
                return False
    return True


def reorder(update: Sequence[int], rules: Sequence[Rule]) -> list[int]:
    """Put the pages named by applicable rules into an order that follows them.

    Pages no rule mentions keep their places; the ruled pages fill the
    remaining places in topological order.
    """
    applied = [(a, b) for a, b in rules if a in update and b in update]
    in_degree: dict[int, int] = {}
    for a, b in applied:
        in_degree.setdefault(a, 0)
        in_degree.setdefault(b, 0)
    for _, b in applied:
        in_degree[b] += 1

    stack: list[int] = []
    order: list[int] = []
    while True:
        ready = [page for page, degree in in_degree.items() if degree == 0]
        for page in ready:
            del in_degree[page]
            stack.append(page)
        if not stack:
            break
        page = stack.pop()
        order.append(page)
        for a, b in applied:
            if a == page and b in in_degree:
                in_degree[b] -= 1

    ordered = set(order)
    placed = iter(order)
    result = []
    for page in update:
        if page in ordered:
            try:
                result.append(next(placed))
            except StopIteration:
                raise ValueError(f"Update repeats ruled pages: {list(update)}") from None
        else:
            result.append(page)
    return result


def part1(text: str) -> str:
    """Sum the middle pages of the updates that are already in order."""
    rules, updates = parse_manual(text)
    return str(
        sum(update[len(update) // 2] for update in updates if is_ordered(update, rules))
    )


def part2(text: str) -> str:
    """Sum the middle pages of the out-of-order updates once they are reordered."""
    rules, updates = parse_manual(text)
    total = 0
    for update in updates:
        if not is_ordered(update, rules):
            fixed = reorder(update, rules)
            total += fixed[len(fixed) // 2]
    return str(total)