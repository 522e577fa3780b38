"""2023 day 13: finding lines of reflection in patterns of ash and rocks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from aocsolve.textio import read_lines
from aocsolve.y2020_day20 import edge_bits


def count_bit_errors(a: int, b: int) -> int:
    """Number of bit positions in which ``a`` and ``b`` differ."""
    return bin(a ^ b).count("1")


def _reflections(values: Sequence[int], bit_errors: int) -> Iterator[tuple[int, int]]:
    """Yield (index, width) for reflections reaching an edge with exactly ``bit_errors`` errors."""
    last = len(values) - 1
    for i in range(last):
        errors = 0
        width = 0
        if values[i] == values[i + 1] or (
            bit_errors
            and (errors := count_bit_errors(values[i], values[i + 1])) == bit_errors
        ):
            width = 1
            for j in range(i + 2, len(values)):
                mirrored = 2 * i + 1 - j
                if mirrored < 0:
                    break
                if values[j] != values[mirrored]:
                    if not bit_errors:
                        break
                    errors += count_bit_errors(values[j], values[mirrored])
                    if errors > bit_errors:
                        break
                width += 1
        if width and errors == bit_errors and (i + width == last or i - width + 1 == 0):
            yield i, width


def find_mirror(rows: Sequence[int], columns: Sequence[int], bit_errors: int) -> int:
    """Summary of the widest reflection: rows above times 100, or columns to the left."""
    best_width = 0
    best: tuple[int, bool] | None = None
    for values, is_rows in ((rows, True), (columns, False)):
        for index, width in _reflections(values, bit_errors):
            if width > best_width:
                best_width = width
                best = (index, is_rows)
    if best is None:
        raise ValueError("pattern has no line of reflection")
    index, is_rows = best
    return (index + 1) * (100 if is_rows else 1)


def _patterns(text: str) -> Iterator[list[str]]:
    pattern: list[str] = []
    for line in read_lines(text):
        if line:
            pattern.append(line)
        elif pattern:
            yield pattern
            pattern = []
    if pattern:
        yield pattern


def _encode(pattern: list[str]) -> tuple[list[int], list[int]]:
    if any(len(line) != len(pattern[0]) for line in pattern):
        raise ValueError("pattern rows differ in length")
    rows = [edge_bits(line, "#") for line in pattern]
    columns = [edge_bits("".join(column), "#") for column in zip(*pattern)]
    return rows, columns


def solve(text: str, bit_errors: int) -> int:
    """Sum of reflection summaries over all patterns."""
    return sum(
        find_mirror(*_encode(pattern), bit_errors) for pattern in _patterns(text)
    )


def part1(text: str) -> int:
    """Summaries of perfect reflections."""
    return solve(text, 0)


def part2(text: str) -> int:
    """Summaries of reflections with exactly one smudge."""
    return solve(text, 1)