import string

import pytest

from aocsolve.y2022_day3 import part1, part2, priority

EXAMPLE = """vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""


def test_priority_pins():
    assert priority("a") == 1
    assert priority("A") == 27


def test_priorities_cover_all_letters_in_order():
    values = [priority(c) for c in string.ascii_letters]
    assert values == list(range(1, len(string.ascii_letters) + 1))


@pytest.mark.parametrize("item", ["1", "", "ab", "é"])
def test_priority_rejects_non_letters(item):
    with pytest.raises(ValueError):
        priority(item)


def test_part1_example():
    assert part1(EXAMPLE) == 157


def test_part2_example():
    assert part2(EXAMPLE) == 70


def test_part1_single_rucksack():
    assert part1("abca\n") == priority("a")


def test_part1_no_common_item():
    with pytest.raises(ValueError):
        part1("abcd\n")


def test_part2_ignores_incomplete_group():
    assert part2(EXAMPLE + "abc\nabd\n") == part2(EXAMPLE)