"""
outcome.py
Win / draw detection shared by every strategy.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import EMPTY, Board, Player

WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)


class Status(Enum):
    WIN = "win"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls(Status.WIN, Player(player))

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status is Status.DRAW

    def __str__(self) -> str:
        if self.status is Status.WIN:
            return f"{self.winner.symbol} wins"
        return "Draw" if self.is_draw else "In progress"


DRAW = Outcome(Status.DRAW)
IN_PROGRESS = Outcome(Status.IN_PROGRESS)


def winner(board: Board) -> Optional[Player]:
    """First satisfied pattern in enumeration order, or None."""
    c = board.cells
    for a, b, d in WIN_PATTERNS:
        if c[a] != EMPTY and c[a] == c[b] == c[d]:
            return Player(c[a])
    return None


def detect(board: Board) -> Outcome:
    w = winner(board)
    if w is not None:
        return Outcome.win(w)
    if board.is_full():
        return DRAW
    return IN_PROGRESS


def winning_move(board: Board, player: Player) -> Optional[int]:
    """Empty cell completing the first pattern holding two `player` cells and one empty cell."""
    c = board.cells
    p = int(player)
    for pattern in WIN_PATTERNS:
        mine = 0
        empty = None
        for i in pattern:
            if c[i] == p:
                mine += 1
            elif c[i] == EMPTY:
                empty = i
        if mine == 2 and empty is not None:
            return empty
    return None
