"""
heatmap.py
Per-cell move scores as a 3x3 grid, and a seaborn heatmap of that grid.
"""

from __future__ import annotations
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from .board import SIZE, Board, Player
from .strategies import Strategy


def score_grid(strategy: Strategy, board: Board, player: Player) -> np.ndarray:
    """Minimax / alpha-beta exact scores or rollout means; NaN on occupied cells."""
    if hasattr(strategy, "score_moves"):
        scores = strategy.score_moves(board, player)
    elif hasattr(strategy, "move_values"):
        scores = strategy.move_values(board, player)
    else:
        raise ValueError(f"{strategy.name} does not expose per-move scores")
    grid = np.full((SIZE, SIZE), np.nan)
    for mv, s in scores.items():
        grid[mv // SIZE, mv % SIZE] = s
    return grid


def plot_score_grid(grid: np.ndarray, title: str, outfile: str) -> str:
    Path(outfile).parent.mkdir(parents=True, exist_ok=True)
    plt.figure(figsize=(4, 4), dpi=120)
    sns.heatmap(grid,
                annot=True,
                fmt=".2f",
                cmap="viridis",
                cbar=False,
                linewidths=.5,
                linecolor="black",
                annot_kws={"size": 14})
    plt.title(title)
    plt.tight_layout()
    plt.savefig(outfile, bbox_inches="tight")
    plt.close()
    return outfile
