"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

WIDTH = 12
MASK = (1 << WIDTH) - 1

_BINARY = re.compile(r"\+?[01]+")
_U16_LIMIT = 1 << 16


def _parse_u16_binary(token: str) -> int | None:
    if not _BINARY.fullmatch(token):
        return None
    value = int(token, 2)
    return value if value < _U16_LIMIT else None


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse(text: str) -> list[int]:
    """Return the binary readings in ``text``, skipping lines that are not binary."""
    return [
        value for line in _lines(text) if (value := _parse_u16_binary(line)) is not None
    ]


def parse_input(path: str | Path) -> list[int]:
    """Read and parse the diagnostic report stored at ``path``."""
    return parse(Path(path).read_text())


def _bit(value: int, position: int) -> int:
    return (value >> position) & 1


def _most_common(readings: Sequence[int], position: int) -> int:
    ones = sum(_bit(value, position) for value in readings)
    return int(ones * 2 >= len(readings))


def part1(readings: Sequence[int]) -> int:
    """Power consumption: gamma rate times epsilon rate over the low 12 bits."""
    gamma = 0
    for position in range(WIDTH):
        gamma |= _most_common(readings, position) << position
    return gamma * (~gamma & MASK)


def part2(readings: Sequence[int]) -> int:
    """Life support rating: oxygen generator rating times CO2 scrubber rating."""
    oxygen = list(readings)
    co2 = list(readings)
    for position in reversed(range(WIDTH)):
        if len(oxygen) > 1:
            wanted = _most_common(oxygen, position)
            oxygen = [value for value in oxygen if _bit(value, position) == wanted]
        if len(co2) > 1:
            common = _most_common(co2, position)
            co2 = [value for value in co2 if _bit(value, position) != common]
    if not oxygen or not co2:
        raise ValueError("no rating remains after filtering")
    return oxygen[0] * co2[0]