"""Lanternfish: simulate an exponentially growing school of fish."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

TIMERS = 9
RESET = 6
NEWBORN = 8

_UNSIGNED = re.compile(r"\+?[0-9]+")


def parse(text: str) -> list[int]:
    """Count fish per timer value from a comma-separated list of timers."""
    counts = [0] * TIMERS
    for token in text.split(","):
        day = token.strip()
        if not _UNSIGNED.fullmatch(day):
            raise ValueError(f"Invalid digit: {token}")
        timer = int(day)
        if timer >= TIMERS:
            raise ValueError(f"Timer out of range: {timer}")
        counts[timer] += 1
    return counts


def parse_input(path: str | Path) -> list[int]:
    """Read and parse the fish timers stored at ``path``."""
    return parse(Path(path).read_text())


def simulate(counts: Sequence[int], days: int) -> int:
    """Total number of fish after ``days`` days."""
    school = list(counts)
    for _ in range(days):
        spawning = school[0]
        school = school[1:] + school[:1]
        school[RESET] += spawning
        school[NEWBORN] = spawning
    return sum(school)


def part1(counts: Sequence[int]) -> int:
    """Fish after 80 days."""
    return simulate(counts, 80)


def part2(counts: Sequence[int]) -> int:
    """Fish after 256 days."""
    return simulate(counts, 256)