import pytest

from sonarsweep.day10 import Answer, parse, parse_input, solve

EXAMPLE = """[({(<(())[]>[[{[]{<()<>>
[(()[<>])]({[<{<<[]>>(
{([(<{}[<>[]}>{[]{[(<()>
(((({<>}<{<{<>}{[]{[]{}
[[<[([]))<([[{}[[()]]]
[{[{({}]{}}([{[{{{}}([]
{<[[]{<[<<>()]}>}[()]{}
[<(<(<(<{}))><([]([]()
<{([([[(<>()){}]>(<<{{
<{([{{}}[<[[[<>{}]]]>[]]
"""


def test_parse_counts_lines():
    assert len(parse(EXAMPLE)) == 10


def test_single_incomplete_line():
    assert solve(["<{([{{}}[<[[[<>{}]]]>[]]"]) == Answer(0, 294)


def test_complete_line_scores_zero():
    assert solve(["[]"]) == Answer(0, 0)


def test_no_incomplete_lines_is_an_error():
    with pytest.raises(ValueError):
        solve(["(]"])


def test_closing_without_opener_is_an_error():
    with pytest.raises(ValueError):
        solve([")"])


def test_unknown_character_is_an_error():
    with pytest.raises(ValueError):
        solve(["(a"])