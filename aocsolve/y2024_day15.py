"""2024 day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from aocsolve.textio import read_lines

_MOVES: dict[str, tuple[int, int]] = {
    ">": (1, 0),
    "<": (-1, 0),
    "^": (0, -1),
    "v": (0, 1),
}
_BOXES = frozenset("O[]")
_WALL = "#"
_FLOOR = "."
_ROBOT = "@"


class Warehouse:
    """A warehouse of single-cell boxes (``O``) that the robot (``@``) pushes."""

    _allowed = frozenset("#.O@")
    _scored_box = "O"

    def __init__(self) -> None:
        self._grid: list[list[str]] = []
        self._robot: tuple[int, int] | None = None

    def _append_row(self, row: str) -> None:
        robot_x = row.rfind(_ROBOT)
        if robot_x >= 0:
            self._robot = (robot_x, len(self._grid))
        self._grid.append(list(row))

    def add_line(self, line: str) -> None:
        """Append one row of the map."""
        unknown = set(line) - self._allowed
        if unknown:
            raise ValueError(f"unexpected map characters {sorted(unknown)} in {line!r}")
        self._append_row(line)

    def _at(self, x: int, y: int) -> str:
        if 0 <= y < len(self._grid) and 0 <= x < len(self._grid[y]):
            return self._grid[y][x]
        return _WALL

    def apply_action(self, action: str) -> None:
        """Move the robot one step, pushing boxes; unknown actions are ignored."""
        step = _MOVES.get(action)
        if step is None:
            return
        if self._robot is None:
            raise ValueError("the map has no robot")
        dx, dy = step
        robot_x, robot_y = self._robot
        moving: list[tuple[int, int]] = []
        seen: set[tuple[int, int]] = set()
        queue = [(robot_x, robot_y)]
        while queue:
            x, y = queue.pop(0)
            nx, ny = x + dx, y + dy
            ahead = self._at(nx, ny)
            if ahead == _WALL:
                return
            if ahead not in _BOXES:
                continue
            cells = [(nx, ny)]
            if dy and ahead == "[":
                cells.append((nx + 1, ny))
            elif dy and ahead == "]":
                cells.append((nx - 1, ny))
            for cell in cells:
                if cell not in seen:
                    seen.add(cell)
                    moving.append(cell)
                    queue.append(cell)
        # Move the farthest cells first so every target is already free.
        moving.sort(key=lambda cell: -(cell[0] * dx + cell[1] * dy))
        for x, y in moving:
            self._grid[y + dy][x + dx] = self._grid[y][x]
            self._grid[y][x] = _FLOOR
        self._grid[robot_y + dy][robot_x + dx] = _ROBOT
        self._grid[robot_y][robot_x] = _FLOOR
        self._robot = (robot_x + dx, robot_y + dy)

    def gps_sum(self) -> int:
        """Sum of 100 * row + column over every box."""
        return sum(
            100 * y + x
            for y, row in enumerate(self._grid)
            for x, char in enumerate(row)
            if char == self._scored_box
        )

    def render(self) -> str:
        """The map as text, one line per row."""
        return "\n".join("".join(row) for row in self._grid)


class WideWarehouse(Warehouse):
    """A warehouse read at double width, where every box covers two cells (``[]``)."""

    _scored_box = "["
    _WIDEN = {"@": "@.", "#": "##", "O": "[]", ".": ".."}

    def add_line(self, line: str) -> None:
        """Append one row of the narrow map, widened to double width."""
        try:
            row = "".join(self._WIDEN[char] for char in line)
        except KeyError as error:
            raise ValueError(
                f"unexpected map character {error.args[0]!r} in {line!r}"
            ) from None
        self._append_row(row)

    def apply_action(self, action: str) -> None:
        """Move the robot one step, pushing wide boxes; unknown actions are ignored."""
        super().apply_action(action)

    def gps_sum(self) -> int:
        """Sum of 100 * row + column over the left edge of every box."""
        return super().gps_sum()

    def render(self) -> str:
        """The widened map as text, one line per row."""
        return super().render()


def _run(warehouse: Warehouse, text: str) -> int:
    for line in read_lines(text):
        if not line:
            continue
        if _WALL in line:
            warehouse.add_line(line)
            continue
        for action in line:
            warehouse.apply_action(action)
    return warehouse.gps_sum()


def part1(text: str) -> int:
    """GPS sum of the boxes after all moves."""
    return _run(Warehouse(), text)


def part2(text: str) -> int:
    """GPS sum of the wide boxes after all moves in the widened warehouse."""
    return _run(WideWarehouse(), text)