import json

import pytest

from ttt_engine.config import EngineConfig, load_config


def test_defaults():
    cfg = load_config()
    assert cfg.seed is None
    assert cfg.search.use_cache is True
    assert cfg.mcts.iterations == 1000
    assert cfg.modeled_mcts.iterations == 2000
    assert cfg.modeled_mcts.likelihood.optimal_hit == 0.8
    assert cfg.qlearning.epsilon == 0.1
    assert cfg.session.ai_delay == 0.4


def test_nested_override(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({
        "seed": 7,
        "mcts": {"iterations": 50},
        "modeled_mcts": {"likelihood": {"greedy_hit": 0.7}},
    }))
    cfg = load_config(str(path))
    assert cfg.seed == 7
    assert cfg.mcts.iterations == 50
    assert cfg.modeled_mcts.iterations == 2000
    assert cfg.modeled_mcts.likelihood.greedy_hit == 0.7
    assert cfg.modeled_mcts.likelihood.greedy_miss == 0.02


def test_round_trip():
    cfg = EngineConfig(seed=3)
    cfg.qlearning.epsilon = 0.25
    assert EngineConfig.from_dict(cfg.to_dict()) == cfg


@pytest.mark.parametrize(
    "data",
    [
        {"colour": "red"},
        {"mcts": {"iterations": 10, "depth": 3}},
        {"mcts": 10},
        {"qlearning": {"epsilon": 1.5}},
        {"mcts": {"iterations": 0}},
        {"session": {"ai_delay": -0.1}},
        {"modeled_mcts": {"likelihood": {"optimal_miss": -1}}},
    ],
)
def test_invalid_config(data):
    with pytest.raises(ValueError):
        EngineConfig.from_dict(data)


def test_bad_json(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_config(str(path))


@pytest.mark.parametrize(
    "data",
    [
        {"mcts": {"iterations": "5"}},
        {"mcts": {"iterations": 2.5}},
        {"seed": "7"},
        {"search": {"use_cache": 1}},
        {"qlearning": {"table_path": 3}},
        {"session": {"ai_delay": True}},
    ],
)
def test_wrong_value_types(data):
    with pytest.raises(ValueError):
        EngineConfig.from_dict(data)


def test_ints_accepted_for_float_fields():
    cfg = EngineConfig.from_dict({"session": {"ai_delay": 0}, "qlearning": {"epsilon": 1, "table_path": None}})
    assert cfg.session.ai_delay == 0
    assert cfg.qlearning.epsilon == 1
