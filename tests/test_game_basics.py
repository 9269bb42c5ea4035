import pytest

from oxo.game_basics import (
    WIN_LINES,
    Player,
    get_winner,
    is_draw,
    is_valid_state,
    legal_moves,
    parse_board,
    render_board,
    serialize_board,
    side_to_move,
    winning_line,
)


def test_win_lines_cover_rows_columns_diagonals():
    assert len(WIN_LINES) == 8
    assert WIN_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WIN_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WIN_LINES[6:] == ((0, 4, 8), (2, 4, 6))


def test_winner_and_draw():
    assert get_winner([1, 1, 1, 0, 0, 0, 0, 0, 0]) == 1
    assert get_winner([2, 0, 0, 2, 0, 0, 2, 0, 0]) == 2
    draw = [1, 1, 2, 2, 2, 1, 1, 2, 1]
    assert get_winner(draw) == 0
    assert is_draw(draw)
    assert not is_draw([0] * 9)


def test_lowest_line_reported_first():
    # X completes row 0 and column 0 at once
    b = [1, 1, 1, 1, 2, 2, 1, 2, 2]
    assert winning_line(b) == (0, 1, 2)


def test_side_to_move_and_legal_moves():
    assert side_to_move([0] * 9) == Player.X
    b = [1, 0, 0, 0, 0, 0, 0, 0, 0]
    assert side_to_move(b) == Player.O
    assert legal_moves(b) == [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("text,expected", [
    ("100020000", [1, 0, 0, 0, 2, 0, 0, 0, 0]),
    ("x...o....", [1, 0, 0, 0, 2, 0, 0, 0, 0]),
    (" XO.......  ", [1, 2, 0, 0, 0, 0, 0, 0, 0]),
])
def test_parse_board_accepts_digits_and_letters(text, expected):
    assert parse_board(text) == expected


@pytest.mark.parametrize("bad", ["", "abc", "0123456789", "12345678x", "00000000"])
def test_parse_board_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_board(bad)


def test_valid_state_rules():
    assert is_valid_state([0] * 9)
    assert is_valid_state([1, 1, 1, 2, 2, 0, 0, 0, 0])
    # O moved first
    assert not is_valid_state([2, 0, 0, 0, 0, 0, 0, 0, 0])
    # X won but O moved afterwards
    assert not is_valid_state([1, 1, 1, 2, 2, 2, 0, 0, 0])


def test_render_board_shows_marks_and_free_indices():
    text = render_board([1, 0, 0, 0, 2, 0, 0, 0, 0])
    lines = text.splitlines()
    assert lines[0] == " X | 1 | 2"
    assert lines[2] == " 3 | O | 5"
    assert lines[4] == " 6 | 7 | 8"
    assert serialize_board([1, 0, 0, 0, 2, 0, 0, 0, 0]) == "100020000"
