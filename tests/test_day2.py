import pytest

from sonarsweep import day2
from sonarsweep.day2 import Command, Direction

EXAMPLE = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"


def test_from_line():
    assert Command.from_line("forward 5") == Command(Direction.FORWARD, 5)
    assert Command.from_line("down  7 ") == Command(Direction.DOWN, 7)
    assert Command.from_line("up 3") == Command(Direction.UP, 3)


def test_from_line_uses_first_letter():
    assert Command.from_line("fly 2") == Command(Direction.FORWARD, 2)


def test_from_line_without_space():
    with pytest.raises(ValueError, match="Invalid line provided"):
        Command.from_line("forward5")


def test_from_line_unknown_direction():
    with pytest.raises(ValueError, match="Could not parse line"):
        Command.from_line("back 5")


@pytest.mark.parametrize("line", ["forward x", "down -1", "up ", " 5"])
def test_from_line_bad_values(line):
    with pytest.raises(ValueError):
        Command.from_line(line)


def test_parse_skips_bad_lines():
    assert day2.parse("forward 1\nnonsense\nback 4\nup 2\n") == [
        Command(Direction.FORWARD, 1),
        Command(Direction.UP, 2),
    ]


def test_part1_example():
    assert day2.part1(day2.parse(EXAMPLE)) == 150


def test_part2_example():
    assert day2.part2(day2.parse(EXAMPLE)) == 900


def test_empty_course():
    assert day2.part1([]) == 0
    assert day2.part2([]) == 0


def test_parse_input_reads_file(tmp_path):
    path = tmp_path / "course.txt"
    path.write_text(EXAMPLE)
    commands = day2.parse_input(path)
    assert len(commands) == 6
    assert day2.part1(commands) == 150