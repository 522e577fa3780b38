"""2024 day 1: reconciling two lists of location ids."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split whitespace-separated numbers alternately into a left and a right list."""
    numbers = [int(token) for token in text.split()]
    if len(numbers) % 2:
        raise ValueError("the two lists differ in length")
    return numbers[::2], numbers[1::2]


def part1(text: str) -> int:
    """Total distance between the lists, pairing them smallest to smallest."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left number times how often it appears on the right."""
    left, right = parse_lists(text)
    right_counts = Counter(right)
    return sum(number * right_counts[number] for number in left)