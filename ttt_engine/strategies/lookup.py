"""
strategies/lookup.py
Sparse table of precomputed responses, falling back to the heuristic.

Covers the empty board, every single-X opening and a few second-ply replies.
It is not a complete perfect-play database.
"""

from __future__ import annotations
import logging
import random
from types import MappingProxyType
from typing import Mapping, Optional

from ..board import Board, Player
from .base import Strategy, StrategyInfo
from .heuristic import HeuristicStrategy

log = logging.getLogger(__name__)


def _build_table() -> Mapping[str, int]:
    table = {"_________": 4}
    for i in range(9):
        key = "_" * i + "X" + "_" * (8 - i)
        table[key] = 0 if i == 4 else 4
    table.update({
        "X___O____": 2,
        "X____O___": 0,
        "X_____O__": 0,
        "X______O_": 2,
        "X_______O": 1,
    })
    return MappingProxyType(table)


OPTIMAL_MOVES: Mapping[str, int] = _build_table()


class LookupTableStrategy(Strategy):
    info = StrategyInfo(
        name="Lookup Table",
        description="Database of pre-computed optimal moves for every possible game state",
        historical_context="Brute-force approach from early computing, guaranteed perfect play",
    )

    def __init__(self, rng: Optional[random.Random] = None, table: Optional[Mapping[str, int]] = None):
        super().__init__(rng)
        self.table = table if table is not None else OPTIMAL_MOVES
        self.fallback = HeuristicStrategy(rng=self.rng)

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        state = board.state_key()
        move = self.table.get(state)
        if move is not None:
            if board.is_empty(move):
                return move
            log.warning("lookup entry %s -> %d points at an occupied cell; using heuristic", state, move)
        return self.fallback.find_move(board, player)
