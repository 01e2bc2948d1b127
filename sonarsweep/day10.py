"""Syntax scoring: find corrupted and incomplete bracket lines."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

_ASCII_WHITESPACE = re.compile(r"[ \t\n\f\r]+")

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_POINTS = {"(": 1, "[": 2, "{": 3, "<": 4}


@dataclass(frozen=True)
class Answer:
    """Total syntax error score and middle completion score."""

    part1: int = 0
    part2: int = 0


def parse(text: str) -> list[str]:
    """Return the non-empty lines of bracket characters."""
    return [line for line in _ASCII_WHITESPACE.split(text) if line]


def parse_input(path: str | Path) -> list[str]:
    """Read and parse the navigation subsystem stored at ``path``."""
    return parse(Path(path).read_text())


def _error_points(char: str) -> int:
    try:
        return _ERROR_POINTS[char]
    except KeyError:
        raise ValueError(f"improper char found: {char!r}") from None


def solve(lines: Iterable[str]) -> Answer:
    """Score corrupted lines and the completions of the incomplete ones."""
    error_score = 0
    completions = []
    for line in lines:
        stack: list[str] = []
        for char in line:
            if char in _PAIRS:
                stack.append(char)
                continue
            if not stack:
                raise ValueError(f"unexpected closing character: {char!r}")
            if _PAIRS[stack.pop()] != char:
                error_score += _error_points(char)
                break
        else:
            score = 0
            for opener in reversed(stack):
                score = score * 5 + _COMPLETION_POINTS[opener]
            completions.append(score)
    if not completions:
        raise ValueError("no incomplete lines")
    completions.sort()
    return Answer(error_score, completions[len(completions) // 2])