import numpy as np
import pytest

from ttt_engine.board import Board, Player
from ttt_engine.config import MCTSConfig
from ttt_engine.heatmap import plot_score_grid, score_grid
from ttt_engine.strategies import HeuristicStrategy, MCTSStrategy, MinimaxStrategy


def test_minimax_grid():
    grid = score_grid(MinimaxStrategy(), Board.from_string("XX__O____"), Player.X)
    assert grid.shape == (3, 3)
    assert grid[0, 2] == 10
    assert np.isnan(grid[0, 0]) and np.isnan(grid[1, 1])
    assert np.count_nonzero(~np.isnan(grid)) == 6


def test_rollout_grid():
    grid = score_grid(MCTSStrategy(MCTSConfig(iterations=10)), Board.from_string("XX__O____"), Player.X)
    assert grid[0, 2] == 1.0


def test_strategy_without_scores():
    with pytest.raises(ValueError):
        score_grid(HeuristicStrategy(), Board(), Player.X)


def test_plot_writes_png(tmp_path):
    grid = score_grid(MinimaxStrategy(), Board.from_string("____O_XX_"), Player.O)
    out = tmp_path / "plots" / "grid.png"
    assert plot_score_grid(grid, "test", str(out)) == str(out)
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
