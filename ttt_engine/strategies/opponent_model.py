"""
strategies/opponent_model.py
Four opponent archetypes and a Bayesian belief over which one the human is.

Likelihood of an observed move m on the board before it was played:
    Random     1/|empty|
    Greedy     hit if m is the immediate win, miss otherwise; 1/|empty| if no win exists
    Defensive  hit if m is the immediate block, miss otherwise; 1/|empty| if no block exists
    Optimal    hit if m is one of the heuristic's candidate moves, miss otherwise
Every archetype gives an illegal move likelihood 0.

Posterior = prior * likelihood / sum(prior * likelihood); skipped when the sum is 0.
"""

from __future__ import annotations
import logging
import random
from enum import Enum
from typing import Dict, Optional

import numpy as np

from ..board import CELLS, Board, Player
from ..config import LikelihoodConfig
from ..outcome import winning_move
from .heuristic import candidate_moves

log = logging.getLogger(__name__)


class Archetype(Enum):
    RANDOM = "Random"
    GREEDY = "Greedy"
    DEFENSIVE = "Defensive"
    OPTIMAL = "Optimal"


ARCHETYPES = tuple(Archetype)


def archetype_move(archetype: Archetype, board: Board, player: Player, rng: random.Random) -> Optional[int]:
    """Move `player` makes when behaving like `archetype`."""
    available = board.empty_cells()
    if not available:
        return None
    if archetype is Archetype.GREEDY:
        win = winning_move(board, player)
        if win is not None:
            return win
    elif archetype is Archetype.DEFENSIVE:
        block = winning_move(board, player.next)
        if block is not None:
            return block
    elif archetype is Archetype.OPTIMAL:
        return rng.choice(candidate_moves(board, player))
    return rng.choice(available)


def likelihood(archetype: Archetype, move: int, board: Board, player: Player,
               constants: Optional[LikelihoodConfig] = None) -> float:
    k = constants or LikelihoodConfig()
    if not (0 <= move < CELLS) or not board.is_empty(move):
        return 0.0
    uniform = 1.0 / len(board.empty_cells())

    if archetype is Archetype.RANDOM:
        return uniform
    if archetype is Archetype.GREEDY:
        win = winning_move(board, player)
        if win is None:
            return uniform
        return k.greedy_hit if move == win else k.greedy_miss
    if archetype is Archetype.DEFENSIVE:
        block = winning_move(board, player.next)
        if block is None:
            return uniform
        return k.defensive_hit if move == block else k.defensive_miss
    # OPTIMAL
    return k.optimal_hit if move in candidate_moves(board, player) else k.optimal_miss


class BeliefDistribution:
    """Probability per archetype, stored in Archetype enumeration order."""

    def __init__(self, probs: Optional[Dict[Archetype, float]] = None):
        if probs is None:
            self.p = np.full(len(ARCHETYPES), 1.0 / len(ARCHETYPES))
        else:
            self.p = np.array([float(probs.get(a, 0.0)) for a in ARCHETYPES])
            total = self.p.sum()
            if np.any(self.p < 0) or total <= 0:
                raise ValueError("Belief probabilities must be >= 0 with a positive sum")
            self.p = self.p / total

    def reset(self) -> None:
        self.p = np.full(len(ARCHETYPES), 1.0 / len(ARCHETYPES))

    def probability(self, archetype: Archetype) -> float:
        return float(self.p[ARCHETYPES.index(archetype)])

    def as_dict(self) -> Dict[Archetype, float]:
        return {a: float(v) for a, v in zip(ARCHETYPES, self.p)}

    def most_likely(self) -> Archetype:
        return ARCHETYPES[int(np.argmax(self.p))]

    def sample(self, rng: random.Random) -> Archetype:
        """Inverse-CDF draw in enumeration order."""
        r = rng.random()
        acc = 0.0
        for a, w in zip(ARCHETYPES, self.p):
            acc += w
            if r <= acc:
                return a
        return Archetype.RANDOM

    def update(self, move: int, board_before: Board, player: Player,
               constants: Optional[LikelihoodConfig] = None) -> bool:
        """Bayes update from one observed move; returns False when skipped (zero mass)."""
        lik = np.array([likelihood(a, move, board_before, player, constants) for a in ARCHETYPES])
        joint = self.p * lik
        total = joint.sum()
        if total <= 0:
            log.debug("belief update skipped: zero likelihood mass for move %s on %s", move, board_before.state_key())
            return False
        self.p = joint / total
        log.debug("beliefs after move %s: %s", move,
                  {a.value: round(float(v), 4) for a, v in zip(ARCHETYPES, self.p)})
        return True

    def __repr__(self) -> str:
        inner = ", ".join(f"{a.value}={v:.3f}" for a, v in zip(ARCHETYPES, self.p))
        return f"BeliefDistribution({inner})"
