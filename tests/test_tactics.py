from oxo.game_basics import Player
from oxo.tactics import fork_moves, gives_opponent_immediate_win, immediate_winning_moves


def test_immediate_wins():
    b = [1, 1, 0, 2, 2, 0, 0, 0, 0]
    assert immediate_winning_moves(b, Player.X) == [2]
    assert immediate_winning_moves(b, Player.O) == [5]


def test_forks():
    # X on two opposite corners, O in the centre: X forks by taking a free corner
    b = [1, 0, 0, 0, 2, 0, 0, 0, 1]
    assert fork_moves(b, Player.X) == [2, 6]
    assert fork_moves(b, Player.O) == []


def test_gives_opponent_immediate_win():
    b = [1, 1, 0, 2, 0, 0, 0, 0, 0]
    assert gives_opponent_immediate_win(b, Player.O, 4)
    assert not gives_opponent_immediate_win(b, Player.O, 2)
    # occupied cell is never a valid candidate
    assert not gives_opponent_immediate_win(b, Player.O, 0)
