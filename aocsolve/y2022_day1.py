"""2022 day 1: counting the elves' calories."""

from __future__ import annotations

from aocsolve.textio import read_lines


def _totals(text: str) -> list[int]:
    totals: list[int] = []
    current: int | None = None
    for line in read_lines(text):
        if line.strip():
            current = (current or 0) + int(line)
        elif current is not None:
            totals.append(current)
            current = None
    if current is not None:
        totals.append(current)
    return totals


def part1(text: str) -> int:
    """Most calories carried by a single elf."""
    return max(_totals(text), default=0)


def part2(text: str) -> int:
    """Sum of the three largest distinct calorie totals."""
    return sum(sorted(set(_totals(text)), reverse=True)[:3])