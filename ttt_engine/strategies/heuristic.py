"""
strategies/heuristic.py
Fixed-priority rule chain: win -> block -> center -> corner -> any.
"""

from __future__ import annotations
from typing import List, Optional

from ..board import CENTER, CORNERS, Board, Player
from ..outcome import winning_move
from .base import Strategy, StrategyInfo


def candidate_moves(board: Board, player: Player) -> List[int]:
    """Cells the rule chain picks from (uniformly); empty only on a full board."""
    win = winning_move(board, player)
    if win is not None:
        return [win]
    block = winning_move(board, player.next)
    if block is not None:
        return [block]
    if board.is_empty(CENTER):
        return [CENTER]
    corners = [i for i in CORNERS if board.is_empty(i)]
    if corners:
        return corners
    return board.empty_cells()


class HeuristicStrategy(Strategy):
    info = StrategyInfo(
        name="Rule-Based Heuristic",
        description="Uses simple priority rules: win if possible, block opponent, take center, corners, then any space",
        historical_context="Classic approach from early computer gaming (1970s-1980s)",
    )

    def candidate_moves(self, board: Board, player: Player) -> List[int]:
        return candidate_moves(board, player)

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        moves = candidate_moves(board, player)
        if not moves:
            return None
        if len(moves) == 1:
            return moves[0]
        return self.rng.choice(moves)
