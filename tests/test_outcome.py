import pytest

from ttt_engine.board import Board, Player
from ttt_engine.outcome import WIN_PATTERNS, Status, detect, winning_move, winner


def test_eight_fixed_patterns():
    assert len(WIN_PATTERNS) == 8
    assert WIN_PATTERNS[0] == (0, 1, 2)
    assert WIN_PATTERNS[-1] == (2, 4, 6)


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_each_pattern_is_a_win(pattern, player):
    b = Board()
    for i in pattern:
        b.place(i, player)
    # one stray opponent token elsewhere
    other = next(i for i in range(9) if i not in pattern)
    b.place(other, player.next)
    out = detect(b)
    assert out.status is Status.WIN
    assert out.winner is player
    assert out.is_terminal


def test_draw_board():
    b = Board.from_string("XOX/XOO/OXX")
    out = detect(b)
    assert out.status is Status.DRAW
    assert out.winner is None
    assert out.is_terminal and out.is_draw


@pytest.mark.parametrize("text", ["_________", "XO_______", "XOXXOO_XO"])
def test_in_progress(text):
    out = detect(Board.from_string(text))
    assert out.status is Status.IN_PROGRESS
    assert not out.is_terminal


def test_full_board_with_win_reports_win():
    b = Board.from_string("XXXOOXXOO")
    assert detect(b).winner is Player.X


def test_winner_helper():
    assert winner(Board.from_string("OOO_XX_X_")) is Player.O
    assert winner(Board()) is None


def test_winning_move():
    b = Board.from_string("XX__O____")
    assert winning_move(b, Player.X) == 2
    assert winning_move(b, Player.O) is None
    # first pattern in enumeration order wins: row (6,7,8) before diag (2,4,6)
    b = Board.from_string("__O___OO_")
    assert winning_move(b, Player.O) == 8
