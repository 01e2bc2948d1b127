# sonarsweep

Solutions to ten of the 2021 holiday puzzles, one module per day. Each
module reads its puzzle input with `parse_input(path)` or, from a string
already in memory, with `parse(text)`, and answers the puzzle with plain
functions. Nothing outside the standard library is needed.

## Modules

| Module              | Puzzle                  | Entry points                                   |
|---------------------|-------------------------|------------------------------------------------|
| `sonarsweep.day1`   | Depth increases         | `part1`, `part2`                               |
| `sonarsweep.day2`   | Submarine course        | `part1`, `part2`, `Command`, `Direction`       |
| `sonarsweep.day3`   | Binary diagnostic       | `part1`, `part2`                               |
| `sonarsweep.day4`   | Bingo boards            | `part1`, `part2`, `calculate_points`, `BingoState` |
| `sonarsweep.day5`   | Hydrothermal vent lines | `part1`, `Line`, `parse_coord`                 |
| `sonarsweep.day6`   | Lanternfish growth      | `part1`, `part2`, `simulate`                   |
| `sonarsweep.day7`   | Crab alignment fuel     | `part1`, `part2`, `CrabState`                  |
| `sonarsweep.day9`   | Smoke basins            | `part1`, `part2`                               |
| `sonarsweep.day10`  | Syntax scoring          | `solve`, `Answer`                              |
| `sonarsweep.day11`  | Octopus flashes         | `part1`, `part2`                               |

Day 5 answers only the first half of its puzzle (straight lines); there is
no function for the diagonal-line half. There is no day 8 module.

## Usage

```python
from sonarsweep import day1, day6, day10

depths = day1.parse("199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n")
print(day1.part1(depths))   # 7
print(day1.part2(depths))   # 5

fish = day6.parse("3,4,3,1,2")
print(day6.part1(fish))     # 5934

answer = day10.solve(day10.parse_input("day10.txt"))
print(answer.part1, answer.part2)
```

The grid puzzles (days 9 and 11) work on a copy of the grid they are given,
so the caller's grid is left as it was.

## Input handling

Days 1, 2 and 3 skip lines that do not parse. The other days raise
`ValueError` on malformed input, and every day raises `ValueError` when the
puzzle has no answer (for example, no winning bingo board, or no step within
1000 on which all octopuses flash).

## No command line

The package is a library only: it installs no command, and reading an input
file and printing the answers is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```