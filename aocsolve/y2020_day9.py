"""2020 day 9: finding the weakness in an XMAS-encoded number stream."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence

DEFAULT_PREAMBLE = 25


def _first_invalid_index(numbers: Sequence[int], preamble_size: int) -> int:
    if preamble_size < 1:
        raise ValueError("preamble size must be positive")
    if len(numbers) < preamble_size:
        raise ValueError("not enough numbers for the preamble")
    window = deque(numbers[:preamble_size])
    counts = Counter(window)
    for index, number in enumerate(numbers[preamble_size:], start=preamble_size):
        if not any(number - other in counts for other in counts):
            return index
        oldest = window.popleft()
        counts[oldest] -= 1
        if not counts[oldest]:
            del counts[oldest]
        window.append(number)
        counts[number] += 1
    raise ValueError("every number is valid")


def find_first_invalid(numbers: Sequence[int], preamble_size: int) -> int:
    """First number that is not a sum of two numbers in the preceding window."""
    return numbers[_first_invalid_index(numbers, preamble_size)]


def find_contiguous_range(numbers: Sequence[int], target: int) -> list[int]:
    """A run of at least two consecutive numbers summing to ``target``, or ``[]``."""
    start = 0
    total = 0
    for end, number in enumerate(numbers):
        total += number
        while total > target and start < end:
            total -= numbers[start]
            start += 1
        if total == target and end > start:
            return list(numbers[start : end + 1])
    return []


def _parse(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def part1(text: str, preamble_size: int = DEFAULT_PREAMBLE) -> int:
    """The first invalid number in the stream."""
    return find_first_invalid(_parse(text), preamble_size)


def part2(text: str, preamble_size: int = DEFAULT_PREAMBLE) -> int:
    """Sum of the smallest and largest numbers of the run adding up to the invalid one."""
    numbers = _parse(text)
    index = _first_invalid_index(numbers, preamble_size)
    run = find_contiguous_range(numbers[:index], numbers[index])
    return min(run) + max(run) if run else 0