import random

import pytest

from ttt_engine.board import Board, Player
from ttt_engine.strategies.lookup import OPTIMAL_MOVES, LookupTableStrategy


@pytest.mark.parametrize(
    "state, expected",
    [
        ("_________", 4),
        ("X________", 4),
        ("____X____", 0),
        ("________X", 4),
        ("X___O____", 2),
        ("X______O_", 2),
        ("X_______O", 1),
    ],
)
def test_table_hits(state, expected):
    b = Board.from_string(state)
    assert LookupTableStrategy().find_move(b, b.player_to_move()) == expected


def test_table_size():
    assert len(OPTIMAL_MOVES) == 15


def test_occupied_entry_falls_back_to_heuristic(caplog):
    b = Board.from_string("X____O___")
    with caplog.at_level("WARNING", logger="ttt_engine.strategies.lookup"):
        mv = LookupTableStrategy(rng=random.Random(0)).find_move(b, Player.X)
    assert mv == 4
    assert "occupied" in caplog.text


def test_every_answer_is_legal():
    strategy = LookupTableStrategy(rng=random.Random(0))
    for state in OPTIMAL_MOVES:
        b = Board.from_string(state)
        assert b.is_empty(strategy.find_move(b, b.player_to_move()))


def test_uncovered_state_uses_heuristic():
    b = Board.from_string("XX__O____")
    assert LookupTableStrategy().find_move(b, Player.X) == 2


def test_table_is_read_only():
    with pytest.raises(TypeError):
        OPTIMAL_MOVES["_________"] = 0


def test_custom_table():
    strategy = LookupTableStrategy(table={"_________": 8})
    assert strategy.find_move(Board(), Player.X) == 8
