import pytest

from sonarsweep.day7 import CrabState, parse, parse_input, part1, part2

EXAMPLE = "16,1,2,0,4,2,7,1,2,14\n"


def test_parse_tracks_range():
    state = parse(EXAMPLE)
    assert state.data == [16, 1, 2, 0, 4, 2, 7, 1, 2, 14]
    assert state.lower == 0
    assert state.higher == 16


def test_part1_example():
    assert part1(parse(EXAMPLE)) == 37


def test_part2_example():
    assert part2(parse(EXAMPLE)) == 168


def test_parse_input_reads_file(tmp_path):
    path = tmp_path / "day7.txt"
    path.write_text(EXAMPLE)
    assert part1(parse_input(path)) == 37


def test_single_crab_needs_no_fuel():
    assert part1(CrabState(0, 5, [5])) == 0
    assert part2(parse("3")) == 0


@pytest.mark.parametrize("text", ["1,x,3", "", "1,,2", "-1"])
def test_parse_rejects_invalid_tokens(text):
    with pytest.raises(ValueError):
        parse(text)