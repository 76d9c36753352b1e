"""
strategies/mcts.py
Flat Monte-Carlo rollout search.

For every legal candidate move run `iterations` random playouts and keep the mean
score (1 win, 0.5 draw, 0 loss for the searching player). The candidate with the
highest mean wins; ties go to the lowest cell index.
"""

from __future__ import annotations
import logging
import random
from typing import Dict, Optional

from ..board import Board, Player
from ..config import MCTSConfig
from ..outcome import winner
from .base import Strategy, StrategyInfo

log = logging.getLogger(__name__)


def playout_score(result: Optional[Player], owner: Player) -> float:
    if result is None:
        return 0.5
    return 1.0 if result == owner else 0.0


def best_by_mean(values: Dict[int, float]) -> Optional[int]:
    best_mv, best_v = None, -1.0
    for mv in sorted(values):
        if values[mv] > best_v:
            best_v, best_mv = values[mv], mv
    return best_mv


class MCTSStrategy(Strategy):
    info = StrategyInfo(
        name="Monte Carlo Tree Search",
        description="Simulates random games from each position to evaluate moves statistically",
        historical_context="Modern approach popularized by AlphaGo (2016), revolutionized game theory algorithms",
    )

    def __init__(self, config: Optional[MCTSConfig] = None, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.config = config or MCTSConfig()
        self.config.validate()

    def rollout(self, board: Board, to_move: Player) -> Optional[Player]:
        """Play uniformly random moves until decided; returns winner or None for a draw."""
        b = board.copy()
        player = to_move
        while True:
            w = winner(b)
            if w is not None:
                return w
            available = b.empty_cells()
            if not available:
                return None
            b.cells[self.rng.choice(available)] = int(player)
            player = player.next

    def move_values(self, board: Board, player: Player) -> Dict[int, float]:
        values: Dict[int, float] = {}
        n = self.config.iterations
        for mv in board.empty_cells():
            start = board.with_move(mv, player)
            total = 0.0
            for _ in range(n):
                total += playout_score(self.rollout(start, player.next), player)
            values[mv] = total / n
        log.debug("mcts %s for %s: %s", board.state_key(), player.symbol,
                  {m: round(v, 3) for m, v in values.items()})
        return values

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        if board.is_full():
            return None
        return best_by_mean(self.move_values(board, player))
