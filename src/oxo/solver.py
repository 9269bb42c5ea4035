"""
Exhaustive minimax with depth-weighted scores, from a fixed maximizing player's perspective.

Scoring of terminal positions reached ``depth`` plies below the position being decided:
- maximizer wins: 10 - depth
- minimizer wins: depth - 10
- draw: 0
Faster wins and slower losses therefore score better.

Tie-break policy:
- Among equally scored moves the lowest cell index wins (scan 0 -> 8, strict >).

Positions are memoised at depth 0 and shifted towards zero by the depth at
which they are reached. A 9-ply game never pushes a score across zero, so the
shift is exact and the memoised search returns the same values as a plain
tree walk.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple

from .game_basics import (
    Player,
    apply_move_t,
    get_winner,
    legal_moves,
    opponent,
)

WIN_SCORE = 10


def _shift(score: int, depth: int) -> int:
    if score > 0:
        return score - depth
    if score < 0:
        return score + depth
    return 0


@lru_cache(maxsize=None)
def _position_score(board_t: tuple, to_move: int, maximizer: int) -> int:
    w = get_winner(board_t)
    if w == maximizer:
        return WIN_SCORE
    if w != 0:
        return -WIN_SCORE
    moves = legal_moves(board_t)
    if not moves:
        return 0
    nxt = int(opponent(to_move))
    scores = [
        _shift(_position_score(apply_move_t(board_t, mv, to_move), nxt, maximizer), 1)
        for mv in moves
    ]
    return max(scores) if to_move == maximizer else min(scores)


def minimax(board: Sequence[int], depth: int, maximizing: bool, player: Player = Player.O) -> int:
    """Score ``board`` for ``player``; ``maximizing`` is True when ``player`` is to move."""
    to_move = player if maximizing else opponent(player)
    return _shift(_position_score(tuple(int(v) for v in board), int(to_move), int(player)), depth)


def move_scores(board: Sequence[int], player: Player = Player.O) -> Tuple[Optional[int], ...]:
    """Minimax score of placing ``player`` on each empty cell (None where occupied)."""
    board_t = tuple(int(v) for v in board)
    scores: list = [None] * 9
    for mv in legal_moves(board_t):
        child = apply_move_t(board_t, mv, player)
        scores[mv] = minimax(child, 0, False, player)
    return tuple(scores)


def best_move(board: Sequence[int], player: Player = Player.O) -> Optional[int]:
    best_score: Optional[int] = None
    best: Optional[int] = None
    for mv, score in enumerate(move_scores(board, player)):
        if score is None:
            continue
        if best_score is None or score > best_score:
            best_score = score
            best = mv
    return best


def solve(board: Sequence[int], player: Player = Player.O) -> Dict:
    """Best move, its score and the per-cell scores for ``player`` to move."""
    scores = move_scores(board, player)
    mv = best_move(board, player)
    return {
        'player': Player(player),
        'value': None if mv is None else scores[mv],
        'best_move': mv,
        'scores': scores,
    }


def cache_clear() -> None:
    _position_score.cache_clear()


def cache_size() -> int:
    return _position_score.cache_info().currsize
