"""2021 day 19: matching beacon reports from underwater scanners."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations, permutations, product
from typing import NamedTuple

from aocsolve.textio import read_lines

Point = tuple[int, int, int]

MIN_OVERLAP = 12

_SIGNS: tuple[tuple[int, int, int], ...] = tuple(product((-1, 1), repeat=3))
_PERMUTATIONS: tuple[tuple[int, int, int], ...] = tuple(permutations(range(3)))


class Alignment(NamedTuple):
    """Where a scanner sits in the reference frame and its beacons seen from there."""

    position: Point
    beacons: list[Point]


def _parse_point(line: str) -> Point:
    parts = line.split(",")
    if len(parts) != 3:
        raise ValueError(f"malformed beacon {line!r}")
    x, y, z = (int(part) for part in parts)
    return x, y, z


def parse_scanners(text: str) -> list[list[Point]]:
    """Read the beacon lists of every scanner, in order of appearance."""
    scanners: list[list[Point]] = []
    for raw in read_lines(text):
        line = raw.strip()
        if not line:
            continue
        if "scanner" in line:
            scanners.append([])
            continue
        if not scanners:
            raise ValueError(f"beacon {line!r} appears before any scanner header")
        scanners[-1].append(_parse_point(line))
    return scanners


def _transform(
    point: Point, signs: Point, perm: Point, offset: Point
) -> Point:
    x, y, z = (
        sign * point[axis] + shift for sign, axis, shift in zip(signs, perm, offset)
    )
    return x, y, z


def align_scanner(
    beacons: set[Point], reference: Sequence[Point], other: Sequence[Point]
) -> Alignment | None:
    """Align ``other`` to the frame of ``reference``.

    The reference beacons are added to ``beacons``; on success the aligned
    beacons of ``other`` are added too. Returns ``None`` if fewer than
    twelve beacons can be matched under any orientation.
    """
    beacons.update(reference)
    counts: Counter[tuple[Point, Point, Point]] = Counter()
    for known in reference:
        for seen in other:
            for signs in _SIGNS:
                for perm in _PERMUTATIONS:
                    x, y, z = (
                        coordinate - sign * seen[axis]
                        for coordinate, sign, axis in zip(known, signs, perm)
                    )
                    offset = (x, y, z)
                    key = (signs, perm, offset)
                    counts[key] += 1
                    if counts[key] >= MIN_OVERLAP:
                        aligned = [
                            _transform(point, signs, perm, offset) for point in other
                        ]
                        beacons.update(aligned)
                        return Alignment(offset, aligned)
    return None


def locate_all(
    scanners: Iterable[Sequence[Point]],
) -> tuple[set[Point], dict[int, Point]]:
    """Align every reachable scanner to scanner 0.

    Returns the set of distinct beacons and the position of each located
    scanner, keyed by its index. Scanner 0 sits at the origin.
    """
    frames = [list(scanner) for scanner in scanners]
    if not frames:
        return set(), {}
    beacons: set[Point] = set(frames[0])
    positions: dict[int, Point] = {0: (0, 0, 0)}
    frontier = [0]
    while frontier:
        discovered: list[int] = []
        for current in frontier:
            for index, other in enumerate(frames):
                if index in positions:
                    continue
                alignment = align_scanner(beacons, frames[current], other)
                if alignment is not None:
                    positions[index] = alignment.position
                    frames[index] = alignment.beacons
                    discovered.append(index)
        frontier = discovered
    return beacons, positions


def part1(text: str) -> int:
    """Number of distinct beacons."""
    beacons, _ = locate_all(parse_scanners(text))
    return len(beacons)


def part2(text: str) -> int:
    """Largest Manhattan distance between two located scanners."""
    _, positions = locate_all(parse_scanners(text))
    return max(
        (
            sum(abs(a - b) for a, b in zip(first, second))
            for first, second in combinations(positions.values(), 2)
        ),
        default=0,
    )