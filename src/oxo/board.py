"""
Board state machine for a single game.

States are InProgress, Won(player) and Drawn. The only transition is
``apply_move``; once a game is won or drawn every further move is answered
with ``MoveError.GAME_OVER`` and the board is left as it is.

Expected edge cases (occupied cell, finished game, bad index, wrong side)
come back as ``MoveError`` values rather than exceptions, so callers branch
on the result type.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .game_basics import (
    EMPTY,
    Player,
    is_full,
    opponent,
    parse_board,
    render_board,
    serialize_board,
    side_to_move,
    winning_line,
)


class MoveError(Enum):
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    WRONG_TURN = "wrong_turn"


@dataclass(frozen=True)
class Continue:
    next_player: Player


@dataclass(frozen=True)
class Win:
    player: Player
    line: Tuple[int, int, int]


@dataclass(frozen=True)
class Draw:
    pass


Outcome = Union[Continue, Win, Draw]


def is_terminal(outcome: object) -> bool:
    return isinstance(outcome, (Win, Draw))


class BoardState:
    """Nine cells, the side to move and whether the game is still running."""

    def __init__(self) -> None:
        self._cells: List[int] = [EMPTY] * 9
        self.current_player: Player = Player.X
        self.active: bool = True

    @classmethod
    def from_cells(cls, cells: Sequence[int]) -> "BoardState":
        """Build a state for an arbitrary position.

        The side to move is inferred from the piece counts and ``active`` from
        the terminal check; no reachability check is made here
        (see ``game_basics.is_valid_state``).
        """
        if len(cells) != 9:
            raise ValueError(f"Expected 9 cells, got {len(cells)}")
        if any(int(v) not in (EMPTY, Player.X, Player.O) for v in cells):
            raise ValueError("Cells must be 0 (empty), 1 (X) or 2 (O)")
        state = cls()
        state._cells = [int(v) for v in cells]
        state.current_player = side_to_move(state._cells)
        state.active = not is_terminal(state.check_terminal())
        return state

    @classmethod
    def from_string(cls, text: str) -> "BoardState":
        return cls.from_cells(parse_board(text))

    @property
    def cells(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    @property
    def outcome(self) -> Outcome:
        return self.check_terminal()

    def copy(self) -> "BoardState":
        other = BoardState()
        other._cells = self._cells[:]
        other.current_player = self.current_player
        other.active = self.active
        return other

    def apply_move(self, index: int, player: Optional[Player] = None) -> Union[Outcome, MoveError]:
        if not self.active:
            return MoveError.GAME_OVER
        if isinstance(index, bool):
            return MoveError.OUT_OF_RANGE
        try:
            index = operator.index(index)
        except TypeError:
            return MoveError.OUT_OF_RANGE
        if not 0 <= index <= 8:
            return MoveError.OUT_OF_RANGE
        if player is not None and player != self.current_player:
            return MoveError.WRONG_TURN
        if self._cells[index] != EMPTY:
            return MoveError.CELL_OCCUPIED

        mover = self.current_player
        self._cells[index] = int(mover)
        result = self.check_terminal()
        if is_terminal(result):
            self.active = False
            return result
        self.current_player = opponent(mover)
        return Continue(self.current_player)

    def check_terminal(self) -> Outcome:
        line = winning_line(self._cells)
        if line is not None:
            return Win(Player(self._cells[line[0]]), line)
        if is_full(self._cells):
            return Draw()
        return Continue(self.current_player)

    def reset(self) -> None:
        self._cells = [EMPTY] * 9
        self.current_player = Player.X
        self.active = True

    def __str__(self) -> str:
        return render_board(self._cells)

    def __repr__(self) -> str:
        return (
            f"BoardState(cells={serialize_board(self._cells)!r}, "
            f"current_player={self.current_player.name}, active={self.active})"
        )
