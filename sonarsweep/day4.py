"""Giant squid: play bingo against a stack of boards."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path

WIDTH = 5

_ROW = (1 << WIDTH) - 1
_COLUMN = sum(1 << (WIDTH * row) for row in range(WIDTH))
WINNING_MASKS = tuple(_ROW << (WIDTH * row) for row in range(WIDTH)) + tuple(
    _COLUMN << (WIDTH - 1 - col) for col in range(WIDTH)
)

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u8(token: str) -> int | None:
    if not _UNSIGNED.fullmatch(token):
        return None
    value = int(token)
    return value if value < 256 else None


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class BingoState:
    """The numbers to be drawn and the boards, each flattened row by row."""

    numbers: list[int] = field(default_factory=list)
    tables: list[list[int]] = field(default_factory=list)


def parse(text: str) -> BingoState:
    """Parse a draw line followed by blank-separated 5x5 boards."""
    lines = iter(_lines(text))
    first = next(lines, None)
    if first is None:
        raise ValueError("No Bingo Line is present")
    numbers = [n for token in first.split(",") if (n := _parse_u8(token)) is not None]
    tables = []
    for _separator in lines:
        tables.append(
            [
                n
                for line in islice(lines, WIDTH)
                for token in line.split(" ")
                if (n := _parse_u8(token)) is not None
            ]
        )
    return BingoState(numbers, tables)


def parse_input(path: str | Path) -> BingoState:
    """Read and parse the bingo subsystem stored at ``path``."""
    return parse(Path(path).read_text())


def calculate_points(table: Sequence[int], marked: int) -> int:
    """Sum of the board's numbers whose bit in ``marked`` is not set."""
    return sum(value for index, value in enumerate(table) if not (marked >> index) & 1)


def _has_won(marked: int) -> bool:
    return any(marked & mask == mask for mask in WINNING_MASKS)


def _mark(table: Sequence[int], number: int, marked: int) -> int | None:
    try:
        return marked | (1 << table.index(number))
    except ValueError:
        return None


def part1(state: BingoState) -> int:
    """Score of the first board to win."""
    marks = [0] * len(state.tables)
    for number in state.numbers:
        for i, table in enumerate(state.tables):
            updated = _mark(table, number, marks[i])
            if updated is None:
                continue
            marks[i] = updated
            if _has_won(updated):
                return number * calculate_points(table, updated)
    raise ValueError("No winning bingo table")


def part2(state: BingoState) -> int:
    """Score of the last board to win."""
    marks = [0] * len(state.tables)
    won = [False] * len(state.tables)
    winners = 0
    for number in state.numbers:
        for i, table in enumerate(state.tables):
            if won[i]:
                continue
            updated = _mark(table, number, marks[i])
            if updated is None:
                continue
            marks[i] = updated
            if _has_won(updated):
                won[i] = True
                winners += 1
                if winners == len(state.tables):
                    return number * calculate_points(table, updated)
    raise ValueError("No winning bingo table")