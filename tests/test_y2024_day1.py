import pytest

from aocsolve.y2024_day1 import parse_lists, part1, part2

EXAMPLE = """\
3   4
4   3
2   5
1   3
3   9
3   3
"""


def test_parse_lists_alternates():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_part1_example():
    assert part1(EXAMPLE) == 11


def test_part2_example():
    assert part2(EXAMPLE) == 31


def test_identical_lists_have_no_distance():
    assert part1("5 1\n1 5\n") == 0


def test_part1_is_symmetric():
    swapped = "\n".join(
        f"{b} {a}" for a, b in zip(*parse_lists(EXAMPLE))
    )
    assert part1(swapped) == part1(EXAMPLE)


def test_part2_without_common_numbers_is_zero():
    assert part2("1 2\n3 4\n") == 0


def test_odd_count_raises():
    with pytest.raises(ValueError):
        parse_lists("1 2\n3\n")


def test_empty_input():
    assert parse_lists("") == ([], [])
    assert part1("") == 0