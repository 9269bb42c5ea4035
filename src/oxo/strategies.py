"""
Computer move strategies, one per difficulty level.

- easy   -> random_move: uniform over empty cells
- medium -> mixed_move: a single coin flip per call picks optimal or random
- hard   -> optimal_move: exhaustive minimax (see ``solver``)

A board without an empty cell yields ``MoveStrategyError.NO_MOVE_AVAILABLE``;
callers must not apply a move in that case.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Union

import numpy as np

from .board import BoardState
from .game_basics import Player, legal_moves
from .solver import best_move


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MoveStrategyError(Enum):
    NO_MOVE_AVAILABLE = "no_move_available"


NO_MOVE_AVAILABLE = MoveStrategyError.NO_MOVE_AVAILABLE

MoveResult = Union[int, MoveStrategyError]
BoardLike = Union[BoardState, Sequence[int]]


def _cells(board: BoardLike) -> Sequence[int]:
    return board.cells if isinstance(board, BoardState) else board


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def random_move(board: BoardLike, player: Player = Player.O,
                rng: Optional[np.random.Generator] = None) -> MoveResult:
    moves = legal_moves(_cells(board))
    if not moves:
        return NO_MOVE_AVAILABLE
    return int(_rng(rng).choice(moves))


def optimal_move(board: BoardLike, player: Player = Player.O,
                 rng: Optional[np.random.Generator] = None) -> MoveResult:
    mv = best_move(_cells(board), player)
    return NO_MOVE_AVAILABLE if mv is None else mv


def mixed_move(board: BoardLike, player: Player = Player.O,
               rng: Optional[np.random.Generator] = None) -> MoveResult:
    rng = _rng(rng)
    if rng.random() < 0.5:
        return optimal_move(board, player, rng)
    return random_move(board, player, rng)


Strategy = Callable[..., MoveResult]

STRATEGIES: Dict[Difficulty, Strategy] = {
    Difficulty.EASY: random_move,
    Difficulty.MEDIUM: mixed_move,
    Difficulty.HARD: optimal_move,
}


def select_move(board: BoardLike, difficulty: Union[Difficulty, str],
                player: Player = Player.O,
                rng: Optional[np.random.Generator] = None) -> MoveResult:
    """Pick a cell for ``player`` according to ``difficulty``.

    Raises ValueError for an unknown difficulty name.
    """
    strategy = STRATEGIES[Difficulty(difficulty)]
    return strategy(board, player, rng)
