import json
import random

import pytest

from ttt_engine.board import Board, Player
from ttt_engine.config import QLearningConfig
from ttt_engine.strategies.qlearning import QLearningStrategy, QTable


def greedy(table=None, seed=0):
    return QLearningStrategy(QLearningConfig(epsilon=0.0), rng=random.Random(seed), table=table)


def test_default_exploration_rate():
    assert QLearningStrategy().config.epsilon == 0.1


def test_argmax_treats_missing_actions_as_zero():
    table = QTable({"_________": {0: -1.0}})
    assert greedy(table).find_move(Board(), Player.X) == 1


def test_argmax_picks_highest_value():
    b = Board.from_string("X___O____")
    table = QTable({b.state_key(): {3: 0.2, 8: 0.7, 0: 5.0}})
    # 0 is occupied, so its value is never considered
    assert greedy(table).find_move(b, Player.X) == 8


def test_argmax_tie_goes_to_lowest_index():
    b = Board.from_string("X___O____")
    table = QTable({b.state_key(): {6: 0.5, 2: 0.5}})
    assert greedy(table).find_move(b, Player.X) == 2


def test_unseen_state_plays_random_legal_move():
    b = Board.from_string("X___O____")
    strategy = greedy(seed=3)
    moves = {strategy.find_move(b, Player.X) for _ in range(100)}
    assert moves <= set(b.empty_cells())
    assert len(moves) > 1


def test_full_exploration_ignores_table():
    b = Board()
    table = QTable({b.state_key(): {4: 100.0}})
    strategy = QLearningStrategy(QLearningConfig(epsilon=1.0), rng=random.Random(1), table=table)
    moves = {strategy.find_move(b, Player.X) for _ in range(100)}
    assert len(moves) > 1


def test_full_board_returns_none():
    assert greedy().find_move(Board.from_string("XOXXOOOXX"), Player.X) is None


def test_table_basics():
    t = QTable()
    assert "_________" not in t
    assert t.get("_________", 4) == 0.0
    t.set("_________", 4, 0.5)
    assert "_________" in t
    assert t.actions("_________") == {4: 0.5}
    assert len(t) == 1
    with pytest.raises(ValueError):
        t.set("_________", 9, 1.0)


def test_save_and_load(tmp_path):
    path = tmp_path / "q.json"
    t = QTable({"X___O____": {2: 0.75, 8: -0.25}})
    t.save(str(path))
    assert json.loads(path.read_text())["X___O____"] == {"2": 0.75, "8": -0.25}
    loaded = QTable.load(str(path))
    assert loaded.actions("X___O____") == {2: 0.75, 8: -0.25}


def test_load_skips_malformed_entries(tmp_path):
    path = tmp_path / "q.json"
    path.write_text(json.dumps({
        "X___O____": {"2": 1.0, "12": 3.0, "x": 1.0},
        "short": {"0": 1.0},
        "_________": "nope",
    }))
    loaded = QTable.load(str(path))
    assert list(loaded) == ["X___O____"]
    assert loaded.actions("X___O____") == {2: 1.0}


def test_load_rejects_non_object(tmp_path):
    path = tmp_path / "q.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        QTable.load(str(path))


def test_config_table_path_is_loaded(tmp_path):
    path = tmp_path / "q.json"
    QTable({"_________": {7: 1.0}}).save(str(path))
    strategy = QLearningStrategy(QLearningConfig(epsilon=0.0, table_path=str(path)), rng=random.Random(0))
    assert strategy.find_move(Board(), Player.X) == 7
