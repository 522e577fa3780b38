# aocsolve

Solvers for a selection of Advent of Code puzzles from 2020 to 2024.
Each puzzle lives in its own module, named after the year and the day.
Every module has `part1(text)`, and most also have `part2(text)`. Both
take the whole puzzle input as one string and return the answer.

## Usage

```python
from pathlib import Path

from aocsolve import y2022_day1

text = Path("input.txt").read_text()
print(y2022_day1.part1(text))
print(y2022_day1.part2(text))
```

Some solvers take an extra setting that the puzzle leaves open:

```python
from aocsolve import y2020_day9, y2023_day11

y2020_day9.part1(text, 25)           # preamble size (25 by default)
y2023_day11.solve(text, 999999)      # extra rows or columns per empty line
```

Some puzzles also expose the objects they are built on, for example:

```python
from aocsolve.y2020_day15 import MemoryGame

game = MemoryGame([0, 3, 6])
game.spoken_on_turn(10)
```

Malformed input raises `ValueError`.

## Puzzles

| Module          | Puzzle                                          | Parts |
|-----------------|-------------------------------------------------|-------|
| `y2020_day2`    | Password policies                               | 1, 2  |
| `y2020_day6`    | Customs declaration answers                     | 1, 2  |
| `y2020_day9`    | Encoding error (XMAS)                           | 1, 2  |
| `y2020_day15`   | Memory game (`MemoryGame`)                      | 1, 2  |
| `y2020_day18`   | Operator precedence                             | 1, 2  |
| `y2020_day20`   | Jigsaw tiles, product of corner ids (`Tile`)    | 1     |
| `y2020_day24`   | Hexagonal floor tiles (`HexFloor`)              | 1, 2  |
| `y2021_day7`    | Crab alignment fuel                             | 1, 2  |
| `y2021_day13`   | Transparent paper folding (`Paper`)             | 1, 2  |
| `y2021_day16`   | Packet decoder: value of the outermost packet   | 1     |
| `y2021_day19`   | Beacon scanners                                 | 1, 2  |
| `y2022_day1`    | Calorie counting                                | 1, 2  |
| `y2022_day2`    | Rock, paper, scissors                           | 1, 2  |
| `y2022_day3`    | Rucksack priorities                             | 1, 2  |
| `y2023_day9`    | Sequence extrapolation                          | 1, 2  |
| `y2023_day11`   | Cosmic expansion                                | 1, 2  |
| `y2023_day13`   | Mirror reflections                              | 1, 2  |
| `y2023_day15`   | Lens library hashing                            | 1, 2  |
| `y2023_day19`   | Part workflows (`Workflow`, `Condition`)        | 1, 2  |
| `y2023_day25`   | Splitting the component graph                   | 1     |
| `y2024_day1`    | Historian list distances                        | 1, 2  |
| `y2024_day9`    | Disk compaction (`DiskMap`)                     | 1, 2  |
| `y2024_day12`   | Garden fencing prices                           | 1, 2  |
| `y2024_day15`   | Warehouse robot (`Warehouse`, `WideWarehouse`)  | 1, 2  |

`y2021_day13.part2` returns the folded sheet drawn as text, with `###`
for a dot and three spaces for an empty cell, for the reader to look at.

Helpers for splitting input are in `aocsolve.textio`:
`split_records(text, delimiter)` and `read_lines(text)`.

## What it does not do

The package is a library only. It has no command-line program, does not
fetch puzzle input, and does not read files itself: the caller reads the
input and passes it in as a string. The modules marked with part 1 only
above have no `part2`.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e ".[test]"
pytest
```