"""Sonar sweep: count depth increases in a list of soundings."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 1 << 32


def _parse_u32(token: str) -> int | None:
    if not _UNSIGNED.fullmatch(token):
        return None
    value = int(token)
    return value if value < _U32_LIMIT else None


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse(text: str) -> list[int]:
    """Return the depths in ``text``, skipping lines that are not depths."""
    return [depth for line in _lines(text) if (depth := _parse_u32(line)) is not None]


def parse_input(path: str | Path) -> list[int]:
    """Read and parse the depth report stored at ``path``."""
    return parse(Path(path).read_text())


def _increases(values: Sequence[int]) -> int:
    return sum(later > earlier for earlier, later in zip(values, values[1:]))


def part1(depths: Sequence[int]) -> int:
    """Count soundings deeper than the one before them."""
    return _increases(depths)


def part2(depths: Sequence[int]) -> int:
    """Count increases between consecutive three-measurement window sums."""
    sums = [sum(depths[start : start + 3]) for start in range(len(depths) - 2)]
    return _increases(sums)