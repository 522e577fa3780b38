"""2020 day 15: the elves' memory game."""

from __future__ import annotations

from collections.abc import Iterable

from aocsolve.textio import split_records


class MemoryGame:
    """A memory game that can be played forward to any later turn."""

    def __init__(self, starting_numbers: Iterable[int]) -> None:
        numbers = list(starting_numbers)
        if not numbers:
            raise ValueError("at least one starting number is required")
        if any(number < 0 for number in numbers):
            raise ValueError("starting numbers must not be negative")
        # _seen[n] is the turn on which n was spoken before the latest turn, 0 if never.
        self._seen = [0] * (max(numbers) + 1)
        for turn, number in enumerate(numbers[:-1], start=1):
            self._seen[number] = turn
        # The last starting number forgets any earlier occurrence.
        self._seen[numbers[-1]] = 0
        self._last = numbers[-1]
        self._turn = len(numbers)

    def spoken_on_turn(self, turn: int) -> int:
        """Play up to ``turn`` and return the number spoken on it."""
        if turn < self._turn:
            raise ValueError(f"turn {turn} has already been played")
        seen = self._seen
        if len(seen) < turn:
            seen.extend([0] * (turn - len(seen)))
        last = self._last
        for played in range(self._turn, turn):
            previous = seen[last]
            seen[last] = played
            last = played - previous if previous else 0
        self._last = last
        self._turn = turn
        return last


def _parse(text: str) -> list[int]:
    return [int(token) for token in split_records(text, ",") if token.strip()]


def part1(text: str) -> int:
    """Number spoken on turn 2020."""
    return MemoryGame(_parse(text)).spoken_on_turn(2020)


def part2(text: str) -> int:
    """Number spoken on turn 30000000."""
    return MemoryGame(_parse(text)).spoken_on_turn(30000000)