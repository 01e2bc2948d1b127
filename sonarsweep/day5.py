"""Hydrothermal venture: find points where vent lines overlap."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U16_LIMIT = 1 << 16


def _parse_u16(token: str) -> int | None:
    if not _UNSIGNED.fullmatch(token):
        return None
    value = int(token)
    return value if value < _U16_LIMIT else None


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_coord(text: str) -> tuple[int, int]:
    """Parse an ``x,y`` pair."""
    x_text, sep, y_text = text.partition(",")
    if not sep:
        raise ValueError("Missing comma between coords")
    x = _parse_u16(x_text.strip())
    if x is None:
        raise ValueError("Invalid x coords")
    y = _parse_u16(y_text.strip())
    if y is None:
        raise ValueError("Invalid y coords")
    return x, y


@dataclass(frozen=True)
class Line:
    """A line of vents between two end points."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_str(cls, text: str) -> Line:
        """Parse a line such as ``0,9 -> 5,9``."""
        start, sep, end = text.partition(" -> ")
        if not sep:
            raise ValueError("Missing arrow")
        x1, y1 = parse_coord(start)
        x2, y2 = parse_coord(end)
        return cls(x1, y1, x2, y2)

    def is_straight(self) -> bool:
        """True for horizontal and vertical lines."""
        return self.x1 == self.x2 or self.y1 == self.y2

    def straight_points(self) -> Iterator[tuple[int, int]]:
        """Points covered by the line, treating it as horizontal or vertical."""
        if self.x1 == self.x2:
            low, high = sorted((self.y1, self.y2))
            return ((self.x1, y) for y in range(low, high + 1))
        low, high = sorted((self.x1, self.x2))
        return ((x, self.y1) for x in range(low, high + 1))


def parse(text: str) -> list[Line]:
    """Parse every line of ``text``; any malformed line is an error."""
    return [Line.from_str(line) for line in _lines(text)]


def parse_input(path: str | Path) -> list[Line]:
    """Read and parse the vent list stored at ``path``."""
    return parse(Path(path).read_text())


def part1(lines: Iterable[Line]) -> int:
    """Number of points covered by at least two straight lines."""
    covered = Counter(
        point for line in lines if line.is_straight() for point in line.straight_points()
    )
    return sum(count >= 2 for count in covered.values())