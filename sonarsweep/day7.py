"""The treachery of whales: align crab submarines at the cheapest position."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 1 << 32


def _parse_u32(token: str) -> int:
    if not _UNSIGNED.fullmatch(token) or int(token) >= _U32_LIMIT:
        raise ValueError(f"invalid position: {token!r}")
    return int(token)


@dataclass
class CrabState:
    """Crab positions with the range of positions worth trying."""

    lower: int = 0
    higher: int = 0
    data: list[int] = field(default_factory=list)


def parse(text: str) -> CrabState:
    """Parse a comma-separated list of horizontal positions."""
    state = CrabState()
    for token in text.split(","):
        position = _parse_u32(token.strip())
        state.lower = min(state.lower, position)
        state.higher = max(state.higher, position)
        state.data.append(position)
    return state


def parse_input(path: str | Path) -> CrabState:
    """Read and parse the crab positions stored at ``path``."""
    return parse(Path(path).read_text())


def _cheapest(state: CrabState, cost: Callable[[int], int]) -> int:
    return min(
        sum(cost(abs(position - pivot)) for position in state.data)
        for pivot in range(state.lower, state.higher + 1)
    )


def part1(state: CrabState) -> int:
    """Least fuel to align when each step costs one unit."""
    return _cheapest(state, lambda distance: distance)


def part2(state: CrabState) -> int:
    """Least fuel to align when each further step costs one unit more."""
    return _cheapest(state, lambda distance: distance * (distance + 1) // 2)