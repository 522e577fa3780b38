"""2022 day 2: rock, paper, scissors strategy guide."""

from __future__ import annotations

from aocsolve.textio import read_lines

# Opponent's move, then our move: shape score plus outcome score.
_ROUND_SCORES = {
    ("A", "X"): 4,
    ("A", "Y"): 8,
    ("A", "Z"): 3,
    ("B", "X"): 1,
    ("B", "Y"): 5,
    ("B", "Z"): 9,
    ("C", "X"): 7,
    ("C", "Y"): 2,
    ("C", "Z"): 6,
}

# Opponent's move, then the wanted outcome (X lose, Y draw, Z win).
_STRATEGY_SCORES = {
    ("A", "X"): 3,
    ("A", "Y"): 4,
    ("A", "Z"): 8,
    ("B", "X"): 1,
    ("B", "Y"): 5,
    ("B", "Z"): 9,
    ("C", "X"): 2,
    ("C", "Y"): 6,
    ("C", "Z"): 7,
}


def _lookup(table: dict[tuple[str, str], int], line: str) -> int:
    if len(line) < 3:
        raise ValueError(f"malformed round {line!r}")
    try:
        return table[line[0], line[2]]
    except KeyError:
        raise ValueError(f"unknown round {line!r}") from None


def score_round(line: str) -> int:
    """Score of a round where the second letter is the shape we play."""
    return _lookup(_ROUND_SCORES, line)


def score_strategy(line: str) -> int:
    """Score of a round where the second letter is the outcome we want."""
    return _lookup(_STRATEGY_SCORES, line)


def part1(text: str) -> int:
    """Total score reading the second column as shapes."""
    return sum(score_round(line) for line in read_lines(text) if line)


def part2(text: str) -> int:
    """Total score reading the second column as outcomes."""
    return sum(score_strategy(line) for line in read_lines(text) if line)