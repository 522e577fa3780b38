"""2021 day 7: aligning crab submarines."""

from __future__ import annotations

from aocsolve.textio import split_records


def fuel_cost(distance: int) -> int:
    """Fuel to move ``distance`` steps when each step costs one more than the last."""
    if distance < 0:
        raise ValueError("distance must not be negative")
    return distance * (distance + 1) // 2


def _parse(text: str) -> list[int]:
    positions = [int(token) for token in split_records(text, ",") if token.strip()]
    if not positions:
        raise ValueError("no crab positions given")
    return positions


def part1(text: str) -> int:
    """Least fuel to align all crabs when each step costs one."""
    positions = sorted(_parse(text))
    target = positions[len(positions) // 2]
    return sum(abs(position - target) for position in positions)


def part2(text: str) -> int:
    """Least fuel to align all crabs when step costs grow."""
    positions = _parse(text)
    return min(
        sum(fuel_cost(abs(position - target)) for position in positions)
        for target in range(min(positions), max(positions) + 1)
    )