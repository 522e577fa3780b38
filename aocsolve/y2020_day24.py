"""2020 day 24: flipping tiles on a hexagonal floor."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

from aocsolve.textio import read_lines

Position = tuple[int, int]

_STEPS: dict[str, Position] = {
    "e": (1, -1),
    "se": (0, -2),
    "sw": (-1, -1),
    "w": (-1, 1),
    "nw": (0, 2),
    "ne": (1, 1),
}


def _steps(path: str) -> Iterator[Position]:
    chars = iter(path)
    for char in chars:
        step = char if char in ("e", "w") else char + next(chars, "")
        try:
            yield _STEPS[step]
        except KeyError:
            raise ValueError(f"unknown direction {step!r} in {path!r}") from None


def _locate(path: str) -> Position:
    x = y = 0
    for dx, dy in _steps(path):
        x += dx
        y += dy
    return x, y


class HexFloor:
    """A hexagonal floor whose tiles are flipped by walking paths from a reference tile."""

    def __init__(self, paths: Iterable[str]) -> None:
        self._black: set[Position] = set()
        for path in paths:
            self._black ^= {_locate(path)}

    def black_tile_count(self) -> int:
        """Number of tiles showing their black side."""
        return len(self._black)

    def advance_days(self, days: int) -> None:
        """Apply the daily flipping rules ``days`` times."""
        if days < 0:
            raise ValueError("days must not be negative")
        for _ in range(days):
            self._advance_day()

    def _advance_day(self) -> None:
        black = self._black
        neighbours = Counter(
            (x + dx, y + dy) for x, y in black for dx, dy in _STEPS.values()
        )
        self._black = {
            tile
            for tile, count in neighbours.items()
            if count == 2 or (count == 1 and tile in black)
        }


def part1(text: str) -> int:
    """Black tiles after following every path."""
    return HexFloor(read_lines(text)).black_tile_count()


def part2(text: str) -> int:
    """Black tiles after a further hundred days."""
    floor = HexFloor(read_lines(text))
    floor.advance_days(100)
    return floor.black_tile_count()