"""
One-ply tactical motifs for the side to move: immediate wins, forks and
moves that hand the opponent a win.

These back the `oxo tactics` command and serve as an independent check on the
solver: optimal play must take an immediate win when one exists and must block
a single threat. Forks are moves that create two or more threats at once;
a move that already wins is not counted as a fork.
"""
from typing import List, Sequence

from .game_basics import EMPTY, get_winner, opponent


def immediate_winning_moves(board: Sequence[int], player: int) -> List[int]:
    wins: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = int(player)
        if get_winner(b) == player:
            wins.append(i)
    return wins


def fork_moves(board: Sequence[int], player: int) -> List[int]:
    forks: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = int(player)
        if get_winner(b) == player:
            continue
        if len(immediate_winning_moves(b, player)) >= 2:
            forks.append(i)
    return forks


def gives_opponent_immediate_win(board: Sequence[int], player: int, move: int) -> bool:
    if board[move] != EMPTY:
        return False
    b = list(board)
    b[move] = int(player)
    return len(immediate_winning_moves(b, opponent(player))) > 0
