"""
Strategy-vs-strategy simulation: play many games between two difficulty levels.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from .board import BoardState, Draw, Outcome, Win
from .game_basics import Player
from .strategies import Difficulty, MoveStrategyError, select_move

logger = logging.getLogger(__name__)


@dataclass
class ArenaResult:
    x_difficulty: Difficulty
    o_difficulty: Difficulty
    games: int = 0
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    total_plies: int = 0

    @property
    def mean_length(self) -> float:
        return self.total_plies / self.games if self.games else 0.0

    def summary(self) -> str:
        return (
            f"X={self.x_difficulty.value} O={self.o_difficulty.value} games={self.games} "
            f"x_wins={self.x_wins} o_wins={self.o_wins} draws={self.draws} "
            f"mean_plies={self.mean_length:.2f}"
        )


def play_game(
    x_difficulty: Union[Difficulty, str],
    o_difficulty: Union[Difficulty, str],
    rng: np.random.Generator,
) -> Tuple[Outcome, List[int]]:
    state = BoardState()
    levels = {Player.X: Difficulty(x_difficulty), Player.O: Difficulty(o_difficulty)}
    moves: List[int] = []
    outcome: Outcome = state.check_terminal()
    while state.active:
        mover = state.current_player
        mv = select_move(state, levels[mover], mover, rng)
        if isinstance(mv, MoveStrategyError):
            # only reachable on a full board, which is already terminal
            raise RuntimeError("strategy returned no move on an active board")
        outcome = state.apply_move(mv, mover)
        moves.append(mv)
    return outcome, moves


def run_arena(
    x_difficulty: Union[Difficulty, str],
    o_difficulty: Union[Difficulty, str],
    games: int = 100,
    seed: Optional[int] = None,
) -> ArenaResult:
    rng = np.random.default_rng(seed)
    result = ArenaResult(Difficulty(x_difficulty), Difficulty(o_difficulty))
    for _ in range(games):
        outcome, moves = play_game(result.x_difficulty, result.o_difficulty, rng)
        result.games += 1
        result.total_plies += len(moves)
        if isinstance(outcome, Win):
            if outcome.player == Player.X:
                result.x_wins += 1
            else:
                result.o_wins += 1
        elif isinstance(outcome, Draw):
            result.draws += 1
    logger.info("Arena finished: %s", result.summary())
    return result
