"""2020 day 2: password policy checks."""

from __future__ import annotations

from aocsolve.textio import read_lines


def _parse(line: str) -> tuple[int, int, str, str]:
    colon = line.index(":")
    if colon < 3:
        raise ValueError(f"malformed policy line {line!r}")
    letter = line[colon - 1]
    low, sep, high = line[: colon - 2].partition("-")
    if not sep:
        raise ValueError(f"malformed policy line {line!r}")
    return int(low), int(high), letter, line[colon + 2 :]


def is_valid_by_count(line: str) -> bool:
    """True if the letter occurs between the two bounds times, inclusive."""
    low, high, letter, password = _parse(line)
    return low <= password.count(letter) <= high


def is_valid_by_position(line: str) -> bool:
    """True if the letter sits at exactly one of the two 1-based positions."""
    first, second, letter, password = _parse(line)
    positions = (first - 1, second - 1)
    if any(not 0 <= position < len(password) for position in positions):
        raise ValueError(f"position outside password in {line!r}")
    return (password[positions[0]] == letter) != (password[positions[1]] == letter)


def part1(text: str) -> int:
    """Number of passwords valid under the count policy."""
    return sum(is_valid_by_count(line) for line in read_lines(text) if line)


def part2(text: str) -> int:
    """Number of passwords valid under the position policy."""
    return sum(is_valid_by_position(line) for line in read_lines(text) if line)