import pytest

from sonarsweep import day5
from sonarsweep.day5 import Line

EXAMPLE = """\
0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""


def test_parse_coord():
    assert day5.parse_coord(" 3 , 4 ") == (3, 4)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("34", "Missing comma between coords"),
        ("a,4", "Invalid x coords"),
        ("3,b", "Invalid y coords"),
        ("70000,1", "Invalid x coords"),
        ("-1,1", "Invalid x coords"),
    ],
)
def test_parse_coord_errors(text, message):
    with pytest.raises(ValueError, match=message):
        day5.parse_coord(text)


def test_line_from_str():
    assert Line.from_str("0,9 -> 5,9") == Line(0, 9, 5, 9)


def test_line_from_str_missing_arrow():
    with pytest.raises(ValueError, match="Missing arrow"):
        Line.from_str("0,9 5,9")


def test_is_straight():
    assert Line(1, 2, 1, 8).is_straight()
    assert Line(1, 2, 5, 2).is_straight()
    assert not Line(0, 0, 8, 8).is_straight()


def test_straight_points_vertical():
    assert list(Line(7, 4, 7, 1).straight_points()) == [(7, 1), (7, 2), (7, 3), (7, 4)]


def test_straight_points_horizontal():
    assert list(Line(3, 4, 1, 4).straight_points()) == [(1, 4), (2, 4), (3, 4)]


def test_straight_points_single():
    assert list(Line(2, 2, 2, 2).straight_points()) == [(2, 2)]


def test_part1_example():
    assert day5.part1(day5.parse(EXAMPLE)) == 5


def test_part1_no_overlap():
    assert day5.part1([Line(0, 0, 0, 3), Line(1, 0, 4, 0)]) == 0


def test_parse_rejects_bad_line():
    with pytest.raises(ValueError):
        day5.parse("0,9 -> 5,9\n\n1,1 -> 2,2\n")


def test_parse_input_reads_file(tmp_path):
    path = tmp_path / "vents.txt"
    path.write_text(EXAMPLE)
    lines = day5.parse_input(path)
    assert len(lines) == 10
    assert day5.part1(lines) == 5