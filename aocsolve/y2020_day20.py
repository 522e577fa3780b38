"""2020 day 20: finding the corner tiles of a jigsaw."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cached_property

from aocsolve.textio import read_lines


def edge_bits(text: str, one: str) -> int:
    """Read ``text`` as a binary number, ``one`` marking set bits, first char highest."""
    number = 0
    for char in text:
        number = (number << 1) | (char == one)
    return number


def edge_bits_reversed(text: str, one: str) -> int:
    """Like :func:`edge_bits` but reading ``text`` from the end."""
    return edge_bits(text[::-1], one)


@dataclass(frozen=True)
class Tile:
    """A square tile with an id and its rows of pixels."""

    number: int
    rows: tuple[str, ...] = field(repr=False)

    def __post_init__(self) -> None:
        if not self.rows:
            raise ValueError(f"tile {self.number} has no rows")

    @cached_property
    def edges(self) -> frozenset[int]:
        """Every border read in both directions, as numbers."""
        first_column = "".join(row[0] for row in self.rows)
        last_column = "".join(row[-1] for row in self.rows)
        sides = (self.rows[0], self.rows[-1], first_column, last_column)
        return frozenset(
            value
            for side in sides
            for value in (edge_bits(side, "#"), edge_bits_reversed(side, "#"))
        )

    def match_count(self, other: Tile) -> int:
        """Number of borders this tile shares with ``other``."""
        # A shared border matches read both ways, so each pair counts twice.
        return len(self.edges & other.edges) // 2


def _parse_title(line: str) -> int:
    _, _, rest = line.partition(" ")
    return int(rest.strip().rstrip(":"))


def parse_tiles(text: str) -> list[Tile]:
    """Read tiles separated by blank lines, each headed by ``Tile <id>:``."""
    tiles: list[Tile] = []
    number: int | None = None
    rows: list[str] = []

    def flush() -> None:
        nonlocal number, rows
        if rows:
            if number is None:
                raise ValueError("tile rows without a title")
            tiles.append(Tile(number, tuple(rows)))
        number, rows = None, []

    for line in read_lines(text):
        if not line:
            flush()
        elif line.startswith("T"):
            number = _parse_title(line)
        else:
            rows.append(line)
    flush()
    return tiles


def corner_tiles(tiles: Sequence[Tile]) -> list[Tile]:
    """Tiles that share a border with exactly two other tiles."""
    return [
        tile
        for index, tile in enumerate(tiles)
        if sum(
            1
            for other_index, other in enumerate(tiles)
            if other_index != index and tile.match_count(other)
        )
        == 2
    ]


def part1(text: str) -> int:
    """Product of the ids of the corner tiles."""
    return math.prod(tile.number for tile in corner_tiles(parse_tiles(text)))