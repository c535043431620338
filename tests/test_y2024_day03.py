from adventsolver.y2024_day03 import part1, part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE1) == "161"


def test_part2_example():
    assert part2(EXAMPLE2) == "48"


def test_numbers_longer_than_three_digits_are_ignored():
    assert part1("mul(1234,2)mul(3,4)") == "12"


def test_disabled_until_reenabled():
    assert part2("don't()mul(2,3)do()mul(4,5)") == "20"


def test_part1_ignores_do_and_dont():
    assert part1("don't()mul(2,3)") == "6"