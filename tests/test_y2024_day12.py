import pytest

from aocsolve.y2024_day12 import (
    discounted_price,
    fencing_price,
    parse_garden,
    part1,
    part2,
)

SMALL = "AAAA\nBBCD\nBBCC\nEEEC\n"

LARGER = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""


def _transpose(garden):
    return tuple("".join(column) for column in zip(*garden))


def test_parse_garden_rows():
    assert parse_garden(SMALL) == ("AAAA", "BBCD", "BBCC", "EEEC")


def test_parse_garden_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_garden("AAA\nAA\n")


def test_part1_small_example():
    assert part1(SMALL) == 140


def test_part2_small_example():
    assert part2(SMALL) == 80


def test_parts_match_functions():
    garden = parse_garden(LARGER)
    assert part1(LARGER) == fencing_price(garden)
    assert part2(LARGER) == discounted_price(garden)


@pytest.mark.parametrize("text", [SMALL, LARGER])
def test_prices_invariant_under_transpose(text):
    garden = parse_garden(text)
    flipped = _transpose(garden)
    assert fencing_price(flipped) == fencing_price(garden)
    assert discounted_price(flipped) == discounted_price(garden)


@pytest.mark.parametrize("text", [SMALL, LARGER, "OOO\nOXO\nOOO\n"])
def test_discount_never_costs_more(text):
    garden = parse_garden(text)
    assert discounted_price(garden) <= fencing_price(garden)


def test_single_cell_regions_have_no_discount():
    garden = parse_garden("AB\nCD\n")
    assert discounted_price(garden) == fencing_price(garden)


def test_enclosed_region_discount_is_smaller():
    garden = parse_garden("OOO\nOXO\nOOO\n")
    assert discounted_price(garden) < fencing_price(garden)