"""
Play session: one human (X) against the computer (O).

The session owns what outlives a single game: the score, the selected
difficulty and the artificial delay before the computer answers. Each game
is a fresh ``BoardState``; the core never sees the score or the delay.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

import numpy as np

from .board import BoardState, Continue, Draw, MoveError, Outcome, Win, is_terminal
from .game_basics import Player
from .strategies import Difficulty, MoveStrategyError, select_move

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 500
MAX_DELAY_MS = 5000

TurnResult = Union[Outcome, MoveError, MoveStrategyError]


def parse_delay(text: Optional[str]) -> int:
    """Parse an operator-supplied delay; anything unusable falls back to 500 ms."""
    if text is None or str(text).strip() == "":
        return DEFAULT_DELAY_MS
    try:
        value = int(str(text).strip(), 10)
    except ValueError:
        return DEFAULT_DELAY_MS
    if 0 <= value <= MAX_DELAY_MS:
        return value
    return DEFAULT_DELAY_MS


@dataclass
class Score:
    player_wins: int = 0
    computer_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome, human: Player = Player.X) -> None:
        if isinstance(outcome, Win):
            if outcome.player == human:
                self.player_wins += 1
            else:
                self.computer_wins += 1
        elif isinstance(outcome, Draw):
            self.draws += 1

    def reset(self) -> None:
        self.player_wins = 0
        self.computer_wins = 0
        self.draws = 0

    def __str__(self) -> str:
        return f"you {self.player_wins} - computer {self.computer_wins} - draws {self.draws}"


class GameSession:
    def __init__(
        self,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
        delay_ms: int = DEFAULT_DELAY_MS,
        rng: Optional[np.random.Generator] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not 0 <= delay_ms <= MAX_DELAY_MS:
            raise ValueError(f"delay_ms must be within [0, {MAX_DELAY_MS}], got {delay_ms}")
        self.difficulty = Difficulty(difficulty)
        self.delay_ms = delay_ms
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sleep = sleep
        self.human = Player.X
        self.computer = Player.O
        self.state = BoardState()
        self.score = Score()
        self.last_computer_move: Optional[int] = None

    def _finish(self, result: TurnResult) -> TurnResult:
        if is_terminal(result):
            self.score.record(result, human=self.human)
            logger.info("Game over: %s (score: %s)", _describe(result), self.score)
        return result

    def human_move(self, index: int) -> TurnResult:
        if self.state.active and self.state.current_player != self.human:
            return MoveError.WRONG_TURN
        result = self.state.apply_move(index, self.human)
        logger.debug("human move %s -> %s", index, _describe(result))
        return self._finish(result)

    def computer_move(self) -> TurnResult:
        if not self.state.active:
            return MoveError.GAME_OVER
        move = select_move(self.state, self.difficulty, self.computer, self.rng)
        if isinstance(move, MoveStrategyError):
            logger.warning("No move available for the computer")
            return move
        result = self.state.apply_move(move, self.computer)
        self.last_computer_move = move
        logger.debug("computer (%s) move %s -> %s", self.difficulty.value, move, _describe(result))
        return self._finish(result)

    def play_turn(self, index: int) -> List[TurnResult]:
        """Human move followed, if the game goes on, by the delayed computer reply."""
        results: List[TurnResult] = [self.human_move(index)]
        if results[0] == Continue(self.computer):
            if self.delay_ms:
                self.sleep(self.delay_ms / 1000.0)
            results.append(self.computer_move())
        return results

    def new_game(self) -> None:
        self.state = BoardState()
        self.last_computer_move = None

    def reset_score(self) -> None:
        self.score.reset()
        logger.info("Score reset")
        self.new_game()

    def set_difficulty(self, difficulty: Union[Difficulty, str]) -> None:
        self.difficulty = Difficulty(difficulty)
        logger.info("Difficulty set to %s", self.difficulty.value)
        self.new_game()

    def status(self) -> str:
        outcome = self.state.check_terminal()
        if isinstance(outcome, Win):
            return "You win!" if outcome.player == self.human else "The computer wins."
        if isinstance(outcome, Draw):
            return "Draw."
        if self.state.current_player == self.human:
            return "You are X, your move."
        return "The computer (O) is thinking..."


def _describe(result: object) -> str:
    if isinstance(result, Win):
        return f"{result.player.name} wins on {list(result.line)}"
    if isinstance(result, Draw):
        return "draw"
    if isinstance(result, Continue):
        return f"{result.next_player.name} to move"
    if isinstance(result, (MoveError, MoveStrategyError)):
        return result.value
    return repr(result)
