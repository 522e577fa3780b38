"""2020 day 6: customs declaration answers."""

from __future__ import annotations

from collections.abc import Iterator

from aocsolve.textio import read_lines


def _groups(text: str) -> Iterator[list[str]]:
    group: list[str] = []
    for line in read_lines(text):
        if line:
            group.append(line)
        elif group:
            yield group
            group = []
    if group:
        yield group


def part1(text: str) -> int:
    """Sum over groups of the questions anyone in the group answered."""
    return sum(len(set("".join(group))) for group in _groups(text))


def part2(text: str) -> int:
    """Sum over groups of the questions everyone in the group answered."""
    return sum(
        len(set.intersection(*(set(person) for person in group)))
        for group in _groups(text)
    )