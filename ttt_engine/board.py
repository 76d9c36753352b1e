"""
board.py
3x3 board model shared by every strategy.

Cells are stored row-major as ints: 1 (X), -1 (O), 0 (empty).
"""

from __future__ import annotations
from enum import IntEnum
from typing import Iterable, List, Optional

import numpy as np

EMPTY = 0
SIZE = 3
CELLS = SIZE * SIZE
CORNERS = (0, 2, 6, 8)
CENTER = 4

EMPTY_SYMBOL = "_"
_EMPTY_ALIASES = {"_", ".", "-", " "}
_SEPARATORS = {"|", "/", "\n", "\t", "\r"}


class Player(IntEnum):
    X = 1
    O = -1

    @property
    def next(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    @property
    def symbol(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> "Player":
        t = str(text).strip().upper()
        if t not in ("X", "O"):
            raise ValueError(f"Unknown player '{text}' (expected X or O)")
        return cls[t]


class Board:
    """
    Ordered sequence of exactly 9 cells, index 0-8.
    Occupied cells are only cleared by `undo` (search backtracking);
    a new game gets a new Board.
    """

    __slots__ = ("cells",)

    def __init__(self, cells: Optional[Iterable[int]] = None):
        if cells is None:
            self.cells: List[int] = [EMPTY] * CELLS
        else:
            self.cells = [int(c) for c in cells]
            if len(self.cells) != CELLS:
                raise ValueError(f"Board needs {CELLS} cells, got {len(self.cells)}")
            if any(c not in (EMPTY, Player.X, Player.O) for c in self.cells):
                raise ValueError("Cells must be 0 (empty), 1 (X) or -1 (O)")

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse 'XX__O____' style strings; '|' or '/' may separate rows."""
        cells = []
        for ch in text:
            if ch in _SEPARATORS:
                continue
            up = ch.upper()
            if up == "X":
                cells.append(int(Player.X))
            elif up == "O":
                cells.append(int(Player.O))
            elif ch in _EMPTY_ALIASES:
                cells.append(EMPTY)
            else:
                raise ValueError(f"Unknown board symbol '{ch}' in {text!r}")
        if len(cells) != CELLS:
            raise ValueError(f"Board string needs {CELLS} cells using X/O/_ (e.g. '____X____'), got {len(cells)}")
        return cls(cells)

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b.cells = self.cells.copy()
        return b

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __len__(self) -> int:
        return CELLS

    def __eq__(self, other) -> bool:
        return isinstance(other, Board) and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board('{self.state_key()}')"

    def __str__(self) -> str:
        key = self.state_key()
        return "\n".join(" ".join(key[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    # ---- queries ----
    def is_empty(self, index: int) -> bool:
        return self.cells[index] == EMPTY

    def empty_cells(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c == EMPTY]

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def count(self, player: Player) -> int:
        return self.cells.count(int(player))

    def player_to_move(self) -> Player:
        return Player.X if self.count(Player.X) == self.count(Player.O) else Player.O

    def state_key(self) -> str:
        """Canonical state key: one of X, O or _ per cell."""
        return "".join(EMPTY_SYMBOL if c == EMPTY else Player(c).symbol for c in self.cells)

    def to_grid(self) -> np.ndarray:
        return np.array(self.cells, dtype=np.int8).reshape(SIZE, SIZE)

    # ---- mutation ----
    def place(self, index: int, player: Player) -> None:
        if not 0 <= index < CELLS:
            raise ValueError(f"Cell index {index} out of range 0..{CELLS - 1}")
        if self.cells[index] != EMPTY:
            raise ValueError(f"Cell {index} is already occupied")
        self.cells[index] = int(player)

    def undo(self, index: int) -> None:
        self.cells[index] = EMPTY

    def with_move(self, index: int, player: Player) -> "Board":
        b = self.copy()
        b.place(index, player)
        return b
