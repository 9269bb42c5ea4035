"""oxo package.

Tic-tac-toe against the computer: board state machine, move strategies for
three difficulty levels, a play session and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import BoardState, Continue, Draw, MoveError, Win
from .game_basics import WIN_LINES, Player
from .session import GameSession, Score
from .strategies import NO_MOVE_AVAILABLE, Difficulty, MoveStrategyError, select_move

__all__ = [
    "BoardState",
    "Continue",
    "Draw",
    "Win",
    "MoveError",
    "Player",
    "WIN_LINES",
    "Difficulty",
    "MoveStrategyError",
    "NO_MOVE_AVAILABLE",
    "select_move",
    "GameSession",
    "Score",
]
