"""2021 day 13: folding transparent paper."""

from __future__ import annotations

from collections.abc import Iterator

from aocsolve.textio import read_lines


class Paper:
    """A sheet of transparent paper marked with dots."""

    def __init__(self) -> None:
        self._dots: set[tuple[int, int]] = set()
        self._width = 0
        self._height = 0

    def add_dot(self, x: int, y: int) -> None:
        """Mark the dot at column ``x`` and row ``y``, growing the sheet if needed."""
        if x < 0 or y < 0:
            raise ValueError(f"dot ({x}, {y}) has a negative coordinate")
        self._dots.add((x, y))
        self._width = max(self._width, x + 1)
        self._height = max(self._height, y + 1)

    def fold_up(self, line: int) -> None:
        """Fold the part below row ``line`` up over the part above it."""
        if line <= 0:
            raise ValueError("fold line must be positive")
        self._dots = {
            (x, (line - y % line) % line if y >= line else y) for x, y in self._dots
        }
        self._height = line

    def fold_left(self, column: int) -> None:
        """Fold the part right of ``column`` over the part left of it."""
        if column <= 0:
            raise ValueError("fold column must be positive")
        self._dots = {
            ((column - x % column) % column if x >= column else x, y)
            for x, y in self._dots
        }
        self._width = column

    def count_dots(self) -> int:
        """Number of visible dots."""
        return len(self._dots)

    def render(self) -> str:
        """The sheet drawn with ``###`` for a dot and three spaces otherwise."""
        return "\n".join(
            "".join(
                "###" if (x, y) in self._dots else "   " for x in range(self._width)
            )
            for y in range(self._height)
        )


def _instructions(text: str) -> Iterator[tuple[str, int, int]]:
    for line in read_lines(text):
        if not line:
            continue
        head, sep, value = line.partition("=")
        if sep:
            if not head:
                raise ValueError(f"malformed fold {line!r}")
            yield ("y" if head[-1] == "y" else "x", int(value), 0)
        else:
            x, comma, y = line.partition(",")
            if not comma:
                raise ValueError(f"malformed dot {line!r}")
            yield ("dot", int(x), int(y))


def _apply(paper: Paper, kind: str, first: int, second: int) -> None:
    if kind == "dot":
        paper.add_dot(first, second)
    elif kind == "y":
        paper.fold_up(first)
    else:
        paper.fold_left(first)


def part1(text: str) -> int:
    """Number of dots visible after the first fold."""
    paper = Paper()
    for kind, first, second in _instructions(text):
        _apply(paper, kind, first, second)
        if kind != "dot":
            break
    return paper.count_dots()


def part2(text: str) -> str:
    """The sheet drawn after every fold."""
    paper = Paper()
    for kind, first, second in _instructions(text):
        _apply(paper, kind, first, second)
    return paper.render()