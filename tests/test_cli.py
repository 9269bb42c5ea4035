import io
import logging

import numpy as np
import pytest

from oxo.cli import main, run_play
from oxo.session import GameSession


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("OXO_DIFFICULTY", "OXO_DELAY_MS", "OXO_SEED"):
        monkeypatch.delenv(var, raising=False)


def test_move_hard_blocks(caplog):
    caplog.set_level(logging.INFO)
    assert main(["move", "--board", "110200000"]) == 0
    assert "player=O" in caplog.text
    assert "move=2" in caplog.text


def test_move_for_explicit_player(caplog):
    caplog.set_level(logging.INFO)
    assert main(["move", "--board", "110220000", "--player", "X"]) == 0
    assert "move=2" in caplog.text


def test_move_full_board_no_move(caplog):
    assert main(["move", "--board", "112221121"]) == 1
    assert "No move available" in caplog.text


def test_move_on_won_board_rejected():
    assert main(["move", "--board", "111220000"]) == 2


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x"])
def test_invalid_boards(bad):
    assert main(["move", "--board", bad]) == 2
    assert main(["solve", "--board", bad]) == 2
    assert main(["tactics", "--board", bad]) == 2


def test_unreachable_board():
    assert main(["solve", "--board", "111222111"]) == 2


def test_solve_reports_scores(caplog):
    caplog.set_level(logging.INFO)
    assert main(["solve", "--board", "110200000"]) == 0
    assert "value=-7" in caplog.text
    assert "best=2" in caplog.text


def test_solve_stdin_streams_csv(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("110200000\nnot-a-board\n\n111220000\n000000000\n"))
    assert main(["solve", "--stdin"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[0] == "board,player,value,best_move,scores"
    assert out[1].startswith("110200000,O,-7,2,")
    assert out[2].startswith("000000000,X,0,0,")
    assert len(out) == 3


def test_tactics(caplog):
    caplog.set_level(logging.INFO)
    assert main(["tactics", "--board", "110220000"]) == 0
    assert "to_move=X wins=[2] forks=[]" in caplog.text


def test_simulate_prints_summary(capsys):
    assert main(["--seed", "1", "simulate", "--x", "easy", "--o", "hard", "--games", "5"]) == 0
    out = capsys.readouterr().out
    assert "games=5" in out and "x_wins=0" in out


def test_simulate_rejects_zero_games():
    assert main(["simulate", "--games", "0"]) == 2


def test_play_delay_out_of_range_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["play", "--delay-ms", "6000"])
    assert exc.value.code == 2


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def _scripted(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_run_play_full_game_against_hard():
    session = GameSession("hard", delay_ms=0, rng=np.random.default_rng(0))
    out = []
    run_play(session, read=_scripted(["4", "4", "0", "2", "6", "q"]), write=out.append)
    text = "\n".join(out)
    assert "That cell is taken." in text
    assert "Computer plays" in text
    assert text.endswith(f"Final score: {session.score}")


def test_run_play_commands():
    session = GameSession("medium", delay_ms=0, rng=np.random.default_rng(0))
    out = []
    run_play(session, read=_scripted(["", "hello", "d hard", "d nope", "0", "n", "s", "9"]),
             write=out.append)
    text = "\n".join(out)
    assert "Difficulty: hard" in text
    assert "Usage: d easy|medium|hard" in text
    assert "Cells are numbered 0-8." in text
    assert session.state.cells == (0,) * 9
    assert "Final score:" in out[-1]


def test_play_command_uses_input(monkeypatch, capsys):
    answers = iter(["4", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--seed", "3", "play", "--difficulty", "easy", "--delay-ms", "0"]) == 0
    out = capsys.readouterr().out
    assert "Computer plays" in out
    assert "Final score" in out
