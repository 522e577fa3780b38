"""2023 day 9: extrapolating sensor readings."""

from __future__ import annotations

from collections.abc import Sequence

from aocsolve.textio import read_lines


def _difference_rows(values: Sequence[int]) -> list[list[int]]:
    if not values:
        raise ValueError("no values to extrapolate from")
    rows = [list(values)]
    while any(rows[-1]):
        current = rows[-1]
        differences = [b - a for a, b in zip(current, current[1:])]
        if not differences:
            raise ValueError("sequence never settles to zero differences")
        rows.append(differences)
    return rows


def predict_next(values: Sequence[int]) -> int:
    """The value that would follow ``values``."""
    return sum(row[-1] for row in _difference_rows(values))


def predict_previous(values: Sequence[int]) -> int:
    """The value that would precede ``values``."""
    previous = 0
    for row in reversed(_difference_rows(values)):
        previous = row[0] - previous
    return previous


def _histories(text: str) -> list[list[int]]:
    return [[int(token) for token in line.split()] for line in read_lines(text) if line.strip()]


def part1(text: str) -> int:
    """Sum of the next value of every history."""
    return sum(predict_next(history) for history in _histories(text))


def part2(text: str) -> int:
    """Sum of the previous value of every history."""
    return sum(predict_previous(history) for history in _histories(text))