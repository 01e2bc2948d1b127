"""Solutions to ten 2021 holiday puzzles, one module per day."""

__version__ = "0.1.0"
__all__ = [
    "day1",
    "day2",
    "day3",
    "day4",
    "day5",
    "day6",
    "day7",
    "day9",
    "day10",
    "day11",
]