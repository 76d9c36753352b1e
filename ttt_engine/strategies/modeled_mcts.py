"""
strategies/modeled_mcts.py
Rollout search where the simulated opponent follows an archetype drawn from
the current belief distribution; the searching player's own simulated moves
stay uniformly random.

Beliefs live on the strategy instance and persist across games of a session.
"""

from __future__ import annotations
import logging
import random
from typing import Dict, Optional

from ..board import Board, Player
from ..config import ModeledMCTSConfig
from ..outcome import winner
from .base import Strategy, StrategyInfo
from .mcts import best_by_mean, playout_score
from .opponent_model import Archetype, BeliefDistribution, archetype_move

log = logging.getLogger(__name__)


class ModeledMCTSStrategy(Strategy):
    info = StrategyInfo(
        name="MCTS + Opponent Model",
        description="MCTS with Bayesian belief distribution over opponent strategies (random, greedy, defensive, optimal)",
        historical_context="Cutting-edge game theory algorithm combining Monte Carlo methods with opponent modeling (2020s)",
    )

    def __init__(self, config: Optional[ModeledMCTSConfig] = None, rng: Optional[random.Random] = None,
                 beliefs: Optional[BeliefDistribution] = None):
        super().__init__(rng)
        self.config = config or ModeledMCTSConfig()
        self.config.validate()
        self._beliefs = beliefs or BeliefDistribution()

    @property
    def beliefs(self) -> Dict[Archetype, float]:
        return self._beliefs.as_dict()

    @property
    def belief_distribution(self) -> BeliefDistribution:
        return self._beliefs

    def reset_beliefs(self) -> None:
        self._beliefs.reset()

    def rollout(self, board: Board, to_move: Player, owner: Player, archetype: Archetype) -> Optional[Player]:
        b = board.copy()
        player = to_move
        while True:
            w = winner(b)
            if w is not None:
                return w
            available = b.empty_cells()
            if not available:
                return None
            if player == owner:
                mv = self.rng.choice(available)
            else:
                mv = archetype_move(archetype, b, player, self.rng)
            b.cells[mv] = int(player)
            player = player.next

    def move_values(self, board: Board, player: Player) -> Dict[int, float]:
        values: Dict[int, float] = {}
        n = self.config.iterations
        for mv in board.empty_cells():
            start = board.with_move(mv, player)
            total = 0.0
            for _ in range(n):
                archetype = self._beliefs.sample(self.rng)
                total += playout_score(self.rollout(start, player.next, player, archetype), player)
            values[mv] = total / n
        log.debug("modeled mcts %s for %s: %s (beliefs %r)", board.state_key(), player.symbol,
                  {m: round(v, 3) for m, v in values.items()}, self._beliefs)
        return values

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        if board.is_full():
            return None
        return best_by_mean(self.move_values(board, player))

    def update_opponent_model(self, observed_move: int, board_before: Board,
                              mover: Optional[Player] = None) -> None:
        """Revise beliefs from the opponent's move; no-op when no archetype explains it."""
        if mover is None:
            mover = board_before.player_to_move()
        self._beliefs.update(observed_move, board_before, mover, self.config.likelihood)
