"""
strategies/base.py
Contract shared by the seven move-selection strategies.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Optional

from ..board import Board, Player


@dataclass(frozen=True)
class StrategyInfo:
    name: str
    description: str
    historical_context: str


class Strategy:
    """
    find_move(board, player) returns a currently-empty cell index in [0, 8],
    or None when the board is full. The board argument is never left modified.
    """

    info: StrategyInfo

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    @property
    def name(self) -> str:
        return self.info.name

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
