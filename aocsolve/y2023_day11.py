"""2023 day 11: distances between galaxies in an expanding universe."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from itertools import combinations

Coordinate = tuple[int, int]


def empty_rows(universe: Sequence[str]) -> set[int]:
    """Indices of rows holding no galaxy."""
    return {index for index, row in enumerate(universe) if set(row) <= {"."}}


def empty_columns(universe: Sequence[str]) -> set[int]:
    """Indices of columns holding no galaxy."""
    if not universe:
        return set()
    return {
        index
        for index in range(len(universe[0]))
        if all(row[index] == "." for row in universe)
    }


def galaxy_coordinates(universe: Sequence[str]) -> list[Coordinate]:
    """Column and row of every galaxy, row by row."""
    return [
        (x, y)
        for y, row in enumerate(universe)
        for x, char in enumerate(row)
        if char == "#"
    ]


def _between(sorted_values: list[int], low: int, high: int) -> int:
    return bisect_right(sorted_values, high) - bisect_right(sorted_values, low)


def sum_distances(
    galaxies: Sequence[Coordinate],
    rows: Iterable[int],
    columns: Iterable[int],
    expansion: int,
) -> int:
    """Sum of distances over all galaxy pairs, each empty line crossed adding ``expansion``."""
    sorted_rows = sorted(rows)
    sorted_columns = sorted(columns)
    total = 0
    for (x1, y1), (x2, y2) in combinations(galaxies, 2):
        total += abs(x1 - x2) + abs(y1 - y2)
        total += expansion * _between(sorted_rows, min(y1, y2), max(y1, y2))
        total += expansion * _between(sorted_columns, min(x1, x2), max(x1, x2))
    return total


def solve(text: str, expansion: int) -> int:
    """Sum of galaxy distances with each empty line grown by ``expansion``."""
    universe = text.split()
    if any(len(row) != len(universe[0]) for row in universe):
        raise ValueError("universe rows differ in length")
    return sum_distances(
        galaxy_coordinates(universe),
        empty_rows(universe),
        empty_columns(universe),
        expansion,
    )


def part1(text: str) -> int:
    """Sum of distances with empty lines doubled."""
    return solve(text, 1)


def part2(text: str) -> int:
    """Sum of distances with empty lines a million times as wide."""
    return solve(text, 999999)