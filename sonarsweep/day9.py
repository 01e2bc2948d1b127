"""Smoke basin: find low points and basins on a height map."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from pathlib import Path

_ASCII_WHITESPACE = re.compile(r"[ \t\n\f\r]+")
_NEIGHBOURS = ((0, 1), (1, 0), (-1, 0), (0, -1))
_WALL = "9"


def parse(text: str) -> list[str]:
    """Return the rows of the height map."""
    return [row for row in _ASCII_WHITESPACE.split(text) if row]


def parse_input(path: str | Path) -> list[str]:
    """Read and parse the height map stored at ``path``."""
    return parse(Path(path).read_text())


def _at(grid: Sequence[Sequence[str]], row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def part1(grid: Sequence[str]) -> int:
    """Sum of the risk levels of all low points."""
    total = 0
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            if all(
                (other := _at(grid, y + dy, x + dx)) is None or height < other
                for dx, dy in _NEIGHBOURS
            ):
                total += abs(ord(height) - ord("0")) + 1
    return total


def _basin_size(grid: list[list[str]], row: int, col: int) -> int:
    size = 0
    stack = [(row, col)]
    while stack:
        row, col = stack.pop()
        if grid[row][col] == _WALL:
            continue
        grid[row][col] = _WALL
        size += 1
        for dr, dc in _NEIGHBOURS:
            other = _at(grid, row + dr, col + dc)
            if other is not None and other < _WALL:
                stack.append((row + dr, col + dc))
    return size


def part2(grid: Sequence[str]) -> int:
    """Product of the sizes of the three largest basins."""
    cells = [list(row) for row in grid]
    width = len(cells[0]) if cells else 0
    sizes = [
        _basin_size(cells, row, col)
        for row in range(len(cells))
        for col in range(width)
        if cells[row][col] != _WALL
    ]
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    return math.prod(sorted(sizes)[-3:])