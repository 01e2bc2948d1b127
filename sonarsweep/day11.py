"""Dumbo octopus: simulate cascading flashes on an energy grid."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

_ASCII_WHITESPACE = re.compile(r"[ \t\n\f\r]+")
_FLASH_LEVEL = 10
_STEP_LIMIT = 1000
_NEIGHBOURS = (
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (0, 1),
    (1, 0),
    (-1, 0),
    (0, -1),
)


def parse(text: str) -> list[list[int]]:
    """Return the grid of energy levels."""
    grid = []
    for row in _ASCII_WHITESPACE.split(text):
        if not row:
            continue
        if not all("0" <= char <= "9" for char in row):
            raise ValueError(f"invalid energy level row: {row!r}")
        grid.append([int(char) for char in row])
    return grid


def parse_input(path: str | Path) -> list[list[int]]:
    """Read and parse the energy grid stored at ``path``."""
    return parse(Path(path).read_text())


def _cascade(grid: list[list[int]], row: int, col: int) -> int:
    flashes = 0
    stack = [(row, col)]
    while stack:
        row, col = stack.pop()
        if grid[row][col] < _FLASH_LEVEL:
            continue
        grid[row][col] = 0
        flashes += 1
        for dr, dc in _NEIGHBOURS:
            r, c = row + dr, col + dc
            if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] != 0:
                grid[r][c] += 1
                stack.append((r, c))
    return flashes


def _step(grid: list[list[int]]) -> int:
    for row in grid:
        row[:] = [level + 1 for level in row]
    width = len(grid[0]) if grid else 0
    return sum(
        _cascade(grid, row, col)
        for row in range(len(grid))
        for col in range(width)
        if grid[row][col] >= _FLASH_LEVEL
    )


def part1(grid: Sequence[Sequence[int]]) -> int:
    """Total flashes over 100 steps."""
    cells = [list(row) for row in grid]
    return sum(_step(cells) for _ in range(100))


def part2(grid: Sequence[Sequence[int]]) -> int:
    """First step on which every octopus flashes at once."""
    cells = [list(row) for row in grid]
    expected = len(cells) * len(cells[0]) if cells else 0
    for step in range(1, _STEP_LIMIT + 1):
        if _step(cells) == expected:
            return step
    raise ValueError("Failed to find for day11 part 2")