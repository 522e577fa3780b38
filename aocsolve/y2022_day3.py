"""2022 day 3: rucksack reorganisation."""

from __future__ import annotations

from collections.abc import Iterable


def priority(item: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    if len(item) != 1 or not item.isascii() or not item.isalpha():
        raise ValueError(f"not an item: {item!r}")
    if item.islower():
        return ord(item) - ord("a") + 1
    return ord(item) - ord("A") + 27


def _common_priority(collections: Iterable[str]) -> int:
    common = set.intersection(*(set(items) for items in collections))
    if not common:
        raise ValueError("no item is shared")
    return priority(min(common))


def part1(text: str) -> int:
    """Sum of priorities of the item found in both halves of each rucksack."""
    total = 0
    for rucksack in text.split():
        middle = len(rucksack) // 2
        total += _common_priority((rucksack[:middle], rucksack[middle:]))
    return total


def part2(text: str) -> int:
    """Sum of priorities of the badge shared by each group of three elves."""
    rucksacks = iter(text.split())
    return sum(_common_priority(group) for group in zip(rucksacks, rucksacks, rucksacks))