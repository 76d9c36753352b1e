"""
Closed set of move-selection strategies behind one `find_move` contract.
"""

from __future__ import annotations
import random
from enum import Enum
from typing import Dict, Optional

from ..config import EngineConfig
from .base import Strategy, StrategyInfo
from .heuristic import HeuristicStrategy
from .lookup import LookupTableStrategy
from .mcts import MCTSStrategy
from .minimax import AlphaBetaStrategy, MinimaxStrategy
from .modeled_mcts import ModeledMCTSStrategy
from .opponent_model import Archetype, BeliefDistribution
from .qlearning import QLearningStrategy, QTable


class StrategyKind(Enum):
    HEURISTIC = "heuristic"
    MINIMAX = "minimax"
    ALPHA_BETA = "alphabeta"
    MCTS = "mcts"
    MCTS_OPPONENT_MODEL = "mcts-model"
    Q_LEARNING = "qlearning"
    LOOKUP_TABLE = "lookup"

    @property
    def slug(self) -> str:
        return self.value

    @classmethod
    def from_slug(cls, slug: str) -> "StrategyKind":
        for kind in cls:
            if kind.value == slug.strip().lower():
                return kind
        raise ValueError(f"Unknown strategy '{slug}' (choose from {', '.join(k.value for k in cls)})")


_CLASSES = {
    StrategyKind.HEURISTIC: HeuristicStrategy,
    StrategyKind.MINIMAX: MinimaxStrategy,
    StrategyKind.ALPHA_BETA: AlphaBetaStrategy,
    StrategyKind.MCTS: MCTSStrategy,
    StrategyKind.MCTS_OPPONENT_MODEL: ModeledMCTSStrategy,
    StrategyKind.Q_LEARNING: QLearningStrategy,
    StrategyKind.LOOKUP_TABLE: LookupTableStrategy,
}


def strategy_info(kind: StrategyKind) -> StrategyInfo:
    return _CLASSES[kind].info


def make_strategy(kind: StrategyKind, config: Optional[EngineConfig] = None,
                  rng: Optional[random.Random] = None) -> Strategy:
    if not isinstance(kind, StrategyKind):
        raise ValueError(f"Not a strategy kind: {kind!r}")
    cfg = config or EngineConfig()
    if rng is None:
        rng = random.Random(cfg.seed)

    if kind is StrategyKind.HEURISTIC:
        return HeuristicStrategy(rng=rng)
    if kind is StrategyKind.MINIMAX:
        return MinimaxStrategy(cfg.search, rng=rng)
    if kind is StrategyKind.ALPHA_BETA:
        return AlphaBetaStrategy(rng=rng)
    if kind is StrategyKind.MCTS:
        return MCTSStrategy(cfg.mcts, rng=rng)
    if kind is StrategyKind.MCTS_OPPONENT_MODEL:
        return ModeledMCTSStrategy(cfg.modeled_mcts, rng=rng)
    if kind is StrategyKind.Q_LEARNING:
        return QLearningStrategy(cfg.qlearning, rng=rng)
    return LookupTableStrategy(rng=rng)


def all_strategy_info() -> Dict[StrategyKind, StrategyInfo]:
    return {kind: strategy_info(kind) for kind in StrategyKind}


__all__ = [
    "Archetype", "AlphaBetaStrategy", "BeliefDistribution", "HeuristicStrategy",
    "LookupTableStrategy", "MCTSStrategy", "MinimaxStrategy", "ModeledMCTSStrategy",
    "QLearningStrategy", "QTable", "Strategy", "StrategyInfo", "StrategyKind",
    "all_strategy_info", "make_strategy", "strategy_info",
]
