import pytest

from adventsolver.y2023_day05 import RangeMap, parse_almanac, part1, part2

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""


def test_part1_example():
    assert part1(EXAMPLE) == 35


def test_part2_example():
    assert part2(EXAMPLE) == 46


def test_parse_almanac_reads_seeds_and_maps():
    seeds, almanac = parse_almanac(EXAMPLE)
    assert seeds == [79, 14, 55, 13]
    assert len(almanac.maps) == 7
    assert almanac.maps[0].entries == [(50, 98, 2), (52, 50, 48)]


@pytest.mark.parametrize("seed, location", [(79, 82), (14, 43), (55, 86), (13, 35)])
def test_locations(seed, location):
    _, almanac = parse_almanac(EXAMPLE)
    assert almanac.location(seed) == location


def test_seed_from_location():
    _, almanac = parse_almanac(EXAMPLE)
    assert almanac.seed(46) == 82
    assert almanac.location(almanac.seed(46)) == 46


def test_range_map_lookup_and_passthrough():
    range_map = RangeMap([(50, 98, 2), (52, 50, 48)])
    assert range_map.lookup(98) == 50
    assert range_map.lookup(53) == 55
    assert range_map.lookup(10) == 10
    assert range_map.reverse_lookup(55) == 53
    assert range_map.reverse_lookup(10) == 10


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part1("")


def test_odd_seed_numbers_raise():
    with pytest.raises(ValueError):
        part2("seeds: 1 2 3\n\nmap:\n1 2 3\n")