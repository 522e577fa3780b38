"""2024 day 12: pricing fences around garden regions."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from aocsolve.textio import read_lines

Garden = tuple[str, ...]
Cell = tuple[int, int]

_DIRECTIONS: tuple[Cell, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


def parse_garden(text: str) -> Garden:
    """Read the garden map as a tuple of equally long rows."""
    rows = tuple(line for line in read_lines(text) if line)
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("garden rows differ in length")
    return rows


def _plant(garden: Sequence[str], cell: Cell) -> str | None:
    x, y = cell
    if 0 <= y < len(garden) and 0 <= x < len(garden[y]):
        return garden[y][x]
    return None


def _regions(garden: Sequence[str]) -> Iterator[set[Cell]]:
    visited: set[Cell] = set()
    for y, row in enumerate(garden):
        for x, plant in enumerate(row):
            if (x, y) in visited:
                continue
            region = {(x, y)}
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for dx, dy in _DIRECTIONS:
                    neighbour = (cx + dx, cy + dy)
                    if neighbour not in region and _plant(garden, neighbour) == plant:
                        region.add(neighbour)
                        stack.append(neighbour)
            visited |= region
            yield region


def _perimeter(garden: Sequence[str], region: set[Cell]) -> int:
    return sum(
        (x + dx, y + dy) not in region for x, y in region for dx, dy in _DIRECTIONS
    )


def _side_starts(garden: Sequence[str], cell: Cell) -> int:
    """Number of fence sides that begin at ``cell``."""
    x, y = cell
    plant = _plant(garden, cell)

    def same(dx: int, dy: int) -> bool:
        return _plant(garden, (x + dx, y + dy)) == plant

    up, down, left, right = same(0, -1), same(0, 1), same(-1, 0), same(1, 0)
    return sum(
        (
            not up and (not left or same(-1, -1)),
            not right and (not up or same(1, -1)),
            not down and (not left or same(-1, 1)),
            not left and (not up or same(-1, -1)),
        )
    )


def _price(garden: Sequence[str], measure: Callable[[set[Cell]], int]) -> int:
    return sum(len(region) * measure(region) for region in _regions(garden))


def fencing_price(garden: Sequence[str]) -> int:
    """Sum over regions of area times perimeter."""
    return _price(garden, lambda region: _perimeter(garden, region))


def discounted_price(garden: Sequence[str]) -> int:
    """Sum over regions of area times number of straight fence sides."""
    return _price(
        garden, lambda region: sum(_side_starts(garden, cell) for cell in region)
    )


def part1(text: str) -> int:
    """Total fencing price."""
    return fencing_price(parse_garden(text))


def part2(text: str) -> int:
    """Total fencing price with the bulk discount."""
    return discounted_price(parse_garden(text))