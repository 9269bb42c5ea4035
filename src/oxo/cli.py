from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

import numpy as np

from .arena import run_arena
from .board import MoveError
from .config import load_settings
from .game_basics import (
    Player,
    get_winner,
    is_valid_state,
    parse_board,
    render_board,
    side_to_move,
)
from .session import MAX_DELAY_MS, GameSession
from .solver import solve
from .strategies import Difficulty, MoveStrategyError, select_move
from .tactics import fork_moves, immediate_winning_moves

DIFFICULTIES = [d.value for d in Difficulty]


def _delay_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if not 0 <= value <= MAX_DELAY_MS:
        raise argparse.ArgumentTypeError(f"must be within [0, {MAX_DELAY_MS}]")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="oxo", description="Tic-tac-toe against the computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for the computer's random choices (default: OXO_SEED)")

    p_play = sub.add_parser("play", help="Play an interactive game in the terminal")
    p_play.add_argument("--difficulty", choices=DIFFICULTIES, default=None,
                        help="Computer strength (default: OXO_DIFFICULTY or medium)")
    p_play.add_argument("--delay-ms", type=_delay_arg, default=None,
                        help="Pause before the computer answers, 0-5000 (default: OXO_DELAY_MS or 500)")

    p_move = sub.add_parser("move", help="Pick a computer move for a board (9 digits, 0=empty,1=X,2=O)")
    p_move.add_argument("--board", required=True, help="Board string, e.g., 110200000")
    p_move.add_argument("--difficulty", choices=DIFFICULTIES, default="hard")
    p_move.add_argument("--player", choices=["X", "O"], default=None,
                        help="Side to play (default: inferred from the board)")

    p_sol = sub.add_parser("solve", help="Minimax scores for every empty cell, side-to-move perspective")
    p_sol.add_argument("--board", help="Board string, e.g., 110200000 (omit with --stdin)")
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_tac = sub.add_parser("tactics", help="List immediate wins and forks for side-to-move")
    p_tac.add_argument("--board", required=True, help="Board string, e.g., 100020200")

    p_sim = sub.add_parser("simulate", help="Play strategies against each other and report results")
    p_sim.add_argument("--x", dest="x_level", choices=DIFFICULTIES, default="easy")
    p_sim.add_argument("--o", dest="o_level", choices=DIFFICULTIES, default="hard")
    p_sim.add_argument("--games", type=int, default=100)

    return p


def _read_board(raw: Optional[str]) -> Optional[List[int]]:
    try:
        b = parse_board(raw or "")
    except ValueError as exc:
        logging.error("%s", exc)
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def run_play(
    session: GameSession,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> int:
    """Terminal game loop; returns when the player quits or input ends."""
    read = read or input
    write = write or print
    help_text = "cells 0-8 to move | n: new game | s: reset score | d <level>: difficulty | q: quit"
    write(help_text)
    while True:
        write(render_board(session.state.cells))
        write(session.status())
        try:
            line = read("> ").strip().lower()
        except EOFError:
            write("")
            break
        if not line:
            continue
        if line in ("q", "quit", "exit"):
            break
        if line in ("n", "new"):
            session.new_game()
            continue
        if line in ("s", "score"):
            session.reset_score()
            write(f"Score: {session.score}")
            continue
        if line.startswith("d"):
            parts = line.split()
            if len(parts) == 2 and parts[1] in DIFFICULTIES:
                session.set_difficulty(parts[1])
                write(f"Difficulty: {session.difficulty.value}")
            else:
                write("Usage: d easy|medium|hard")
            continue
        if not line.isdigit():
            write(help_text)
            continue
        results = session.play_turn(int(line))
        first = results[0]
        if first is MoveError.CELL_OCCUPIED:
            write("That cell is taken.")
        elif first is MoveError.OUT_OF_RANGE:
            write("Cells are numbered 0-8.")
        if len(results) > 1 and not isinstance(results[-1], (MoveError, MoveStrategyError)):
            write(f"Computer plays {session.last_computer_move}")
        if not session.state.active:
            write(render_board(session.state.cells))
            write(session.status())
            write(f"Score: {session.score}")
            session.new_game()
            write("New game.")
    write(f"Final score: {session.score}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("oxo"))
        except Exception:
            print("unknown")
        return 0

    settings = load_settings()
    seed = ns.seed if ns.seed is not None else settings.seed
    rng = np.random.default_rng(seed)

    if ns.cmd == "play":
        session = GameSession(
            difficulty=ns.difficulty or settings.difficulty,
            delay_ms=ns.delay_ms if ns.delay_ms is not None else settings.delay_ms,
            rng=rng,
        )
        logging.debug("difficulty=%s delay_ms=%d seed=%s",
                      session.difficulty.value, session.delay_ms, seed)
        return run_play(session)

    if ns.cmd == "move":
        b = _read_board(ns.board)
        if b is None:
            return 2
        if get_winner(b) != 0:
            logging.error("Board is already won; no move to make.")
            return 2
        player = Player[ns.player] if ns.player else side_to_move(b)
        mv = select_move(b, ns.difficulty, player, rng)
        if isinstance(mv, MoveStrategyError):
            logging.error("No move available: the board is full.")
            return 1
        logging.info("player=%s difficulty=%s move=%d", player.name, ns.difficulty, mv)
        return 0

    if ns.cmd == "solve":
        import sys as _sys
        if ns.stdin:
            import csv as _csv
            w = _csv.writer(_sys.stdout)
            w.writerow(["board", "player", "value", "best_move", "scores"])
            for line in _sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    b = parse_board(raw)
                except ValueError:
                    continue
                if not is_valid_state(b) or get_winner(b) != 0:
                    continue
                res = solve(b, side_to_move(b))
                w.writerow([
                    raw,
                    res['player'].name,
                    "" if res['value'] is None else res['value'],
                    "" if res['best_move'] is None else res['best_move'],
                    ' '.join("." if s is None else str(s) for s in res['scores']),
                ])
            return 0
        b = _read_board(ns.board)
        if b is None:
            return 2
        if get_winner(b) != 0:
            logging.error("Board is already won; nothing to solve.")
            return 2
        res = solve(b, side_to_move(b))
        logging.info(
            "player=%s value=%s best=%s scores=%s",
            res['player'].name,
            res['value'],
            res['best_move'],
            list(res['scores']),
        )
        return 0

    if ns.cmd == "tactics":
        b = _read_board(ns.board)
        if b is None:
            return 2
        p = side_to_move(b)
        logging.info(
            "to_move=%s wins=%s forks=%s",
            p.name,
            immediate_winning_moves(b, p),
            fork_moves(b, p),
        )
        return 0

    if ns.cmd == "simulate":
        if ns.games < 1:
            logging.error("--games must be positive")
            return 2
        result = run_arena(ns.x_level, ns.o_level, games=ns.games, seed=seed)
        print(result.summary())
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
