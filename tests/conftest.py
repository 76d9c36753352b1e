import random

import pytest

from ttt_engine.board import Board
from ttt_engine.config import EngineConfig
from ttt_engine.outcome import detect


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fast_config():
    """Engine config with small rollout counts so MCTS tests stay quick."""
    cfg = EngineConfig(seed=7)
    cfg.mcts.iterations = 60
    cfg.modeled_mcts.iterations = 60
    cfg.qlearning.epsilon = 0.0
    cfg.session.ai_delay = 0.0
    return cfg


def reachable_states():
    """Every board reachable from the empty board by legal alternating play (X first)."""
    seen = {}
    stack = [Board()]
    while stack:
        b = stack.pop()
        key = b.state_key()
        if key in seen:
            continue
        seen[key] = b
        if detect(b).is_terminal:
            continue
        mover = b.player_to_move()
        for i in b.empty_cells():
            stack.append(b.with_move(i, mover))
    return list(seen.values())


@pytest.fixture(scope="session")
def all_states():
    return reachable_states()


@pytest.fixture(scope="session")
def open_states(all_states):
    return [b for b in all_states if not detect(b).is_terminal]
