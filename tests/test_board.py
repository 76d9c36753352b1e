import numpy as np
import pytest

from ttt_engine.board import EMPTY, Board, Player


def test_empty_board_has_nine_empty_cells():
    b = Board()
    assert len(b) == 9
    assert b.empty_cells() == list(range(9))
    assert not b.is_full()
    assert b.state_key() == "_________"


def test_player_alternation():
    assert Player.X.next is Player.O
    assert Player.O.next is Player.X
    assert Player.parse("o") is Player.O
    with pytest.raises(ValueError):
        Player.parse("Z")


@pytest.mark.parametrize(
    "text, key",
    [
        ("XX__O____", "XX__O____"),
        ("XX_|_O_|___", "XX__O____"),
        ("x.o/...\n..x", "X_O_____X"),
        ("X O      ", "X_O______"),
    ],
)
def test_from_string(text, key):
    assert Board.from_string(text).state_key() == key


@pytest.mark.parametrize("text", ["XX", "XXXXXXXXXX", "XX__Q____"])
def test_from_string_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Board.from_string(text)


def test_place_and_occupied_cell():
    b = Board()
    b.place(4, Player.O)
    assert b[4] == Player.O
    with pytest.raises(ValueError):
        b.place(4, Player.X)
    with pytest.raises(ValueError):
        b.place(9, Player.X)


def test_copy_is_independent():
    b = Board.from_string("X________")
    c = b.copy()
    c.place(1, Player.O)
    assert b.state_key() == "X________"
    assert c.state_key() == "XO_______"
    d = b.with_move(8, Player.O)
    assert b[8] == EMPTY and d[8] == Player.O


def test_player_to_move_counts_tokens():
    assert Board().player_to_move() is Player.X
    assert Board.from_string("X________").player_to_move() is Player.O
    assert Board.from_string("X___O____").player_to_move() is Player.X


def test_to_grid_is_row_major():
    grid = Board.from_string("X_O______").to_grid()
    assert grid.shape == (3, 3)
    assert grid[0, 0] == 1 and grid[0, 2] == -1
    assert np.count_nonzero(grid) == 2


def test_str_has_three_rows():
    assert str(Board.from_string("XO_______")).splitlines() == ["X O _", "_ _ _", "_ _ _"]
