"""Dive: follow submarine steering commands."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 1 << 32


def _parse_u32(token: str) -> int:
    if not _UNSIGNED.fullmatch(token) or int(token) >= _U32_LIMIT:
        raise ValueError(f"invalid magnitude: {token!r}")
    return int(token)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class Direction(Enum):
    """The way a command moves the submarine."""

    FORWARD = "f"
    DOWN = "d"
    UP = "u"


@dataclass(frozen=True)
class Command:
    """A single steering command."""

    direction: Direction
    magnitude: int

    @classmethod
    def from_line(cls, line: str) -> Command:
        """Parse a line such as ``forward 5``."""
        direction, sep, magnitude = line.partition(" ")
        if not sep:
            raise ValueError("Invalid line provided")
        amount = _parse_u32(magnitude.strip())
        if not direction:
            raise ValueError("Could not parse line")
        try:
            kind = Direction(direction[0])
        except ValueError:
            raise ValueError("Could not parse line") from None
        return cls(kind, amount)


def parse(text: str) -> list[Command]:
    """Return the commands in ``text``, skipping lines that do not parse."""
    commands = []
    for line in _lines(text):
        try:
            commands.append(Command.from_line(line))
        except ValueError:
            continue
    return commands


def parse_input(path: str | Path) -> list[Command]:
    """Read and parse the command list stored at ``path``."""
    return parse(Path(path).read_text())


def part1(commands: Iterable[Command]) -> int:
    """Product of horizontal position and depth with direct depth changes."""
    horizontal = depth = 0
    for command in commands:
        match command.direction:
            case Direction.UP:
                depth -= command.magnitude
            case Direction.DOWN:
                depth += command.magnitude
            case Direction.FORWARD:
                horizontal += command.magnitude
    return horizontal * depth


def part2(commands: Iterable[Command]) -> int:
    """Product of horizontal position and depth when up and down change aim."""
    horizontal = depth = aim = 0
    for command in commands:
        match command.direction:
            case Direction.UP:
                aim -= command.magnitude
            case Direction.DOWN:
                aim += command.magnitude
            case Direction.FORWARD:
                horizontal += command.magnitude
                depth += aim * command.magnitude
    return horizontal * depth