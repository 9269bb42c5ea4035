"""
Game basics: board representation, serialization, rules, winner/draw checks, validity.

- A board is a sequence of 9 cells: 0=empty, 1=X, 2=O. X always starts.
- Cells are numbered row-major, 0..8 from the top-left corner.
- A "ply" is a half-move (one player's turn).
"""
from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

EMPTY = 0


class Player(IntEnum):
    X = 1
    O = 2


WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

_CHAR_TO_CELL = {'0': 0, '.': 0, '1': 1, 'x': 1, '2': 2, 'o': 2}
_CELL_TO_CHAR = {1: 'X', 2: 'O'}


def serialize_board(board: Sequence[int]) -> str:
    return ''.join(str(int(cell)) for cell in board)


def parse_board(text: str) -> List[int]:
    """Parse user input such as ``100020000`` or ``x...o....``.

    Raises ValueError on anything that is not exactly 9 known characters.
    """
    raw = (text or '').strip().lower()
    if len(raw) != 9 or any(c not in _CHAR_TO_CELL for c in raw):
        raise ValueError("Invalid board string. Must be 9 chars of 0/1/2 (or ./x/o).")
    return [_CHAR_TO_CELL[c] for c in raw]


def opponent(player: int) -> Player:
    return Player.O if player == Player.X else Player.X


def winning_line(board: Sequence[int]) -> Optional[Tuple[int, int, int]]:
    # Lines are scanned in canonical order so simultaneous wins resolve to the lowest line.
    for line in WIN_LINES:
        a, b, c = line
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return line
    return None


def get_winner(board: Sequence[int]) -> int:
    line = winning_line(board)
    return 0 if line is None else int(board[line[0]])


def is_full(board: Sequence[int]) -> bool:
    return EMPTY not in board


def is_draw(board: Sequence[int]) -> bool:
    return is_full(board) and get_winner(board) == 0


def legal_moves(board: Sequence[int]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def get_piece_counts(board: Sequence[int]) -> Tuple[int, int]:
    return list(board).count(Player.X), list(board).count(Player.O)


def side_to_move(board: Sequence[int]) -> Player:
    x, o = get_piece_counts(board)
    return Player.X if x == o else Player.O


def apply_move_t(board_t: tuple, idx: int, player: int) -> tuple:
    lst = list(board_t)
    lst[idx] = int(player)
    return tuple(lst)


def is_valid_state(board: Sequence[int]) -> bool:
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    w = get_winner(board)
    if w == Player.X and x_count != o_count + 1:
        return False
    if w == Player.O and x_count != o_count:
        return False

    # no double winners
    def count_wins(p: int) -> int:
        return sum(1 for line in WIN_LINES if all(board[i] == p for i in line))
    if count_wins(Player.X) > 0 and count_wins(Player.O) > 0:
        return False
    return True


def render_board(board: Sequence[int]) -> str:
    """Three text rows; empty cells show their index so they can be typed back."""
    rows = []
    for r in range(3):
        cells = [
            _CELL_TO_CHAR.get(int(board[i]), str(i))
            for i in range(r * 3, r * 3 + 3)
        ]
        rows.append(' ' + ' | '.join(cells))
    return '\n---+---+---\n'.join(rows)
