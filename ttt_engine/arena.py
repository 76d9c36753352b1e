"""
arena.py
Strategy-vs-strategy games and round-robin W/D/L tables.
"""

from __future__ import annotations
import itertools
import logging
import random
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from .board import Board, Player
from .config import EngineConfig
from .outcome import Outcome, detect
from .strategies import Strategy, StrategyKind, make_strategy

log = logging.getLogger(__name__)


def play_game(x_strategy: Strategy, o_strategy: Strategy,
              start: Optional[Board] = None) -> Tuple[Outcome, List[int]]:
    """Play to completion; each side's moves are shown to the other side's opponent model."""
    board = start.copy() if start is not None else Board()
    players = {Player.X: x_strategy, Player.O: o_strategy}
    moves: List[int] = []
    outcome = detect(board)
    while not outcome.is_terminal:
        mover = board.player_to_move()
        mv = players[mover].find_move(board, mover)
        if mv is None or not 0 <= mv < len(board) or not board.is_empty(mv):
            raise RuntimeError(f"{players[mover].name} returned illegal move {mv} on {board.state_key()}")
        observer = getattr(players[mover.next], "update_opponent_model", None)
        if observer is not None:
            observer(mv, board.copy(), mover)
        board.place(mv, mover)
        moves.append(mv)
        outcome = detect(board)
    return outcome, moves


def run_tournament(kinds: Iterable[StrategyKind], games: int = 10,
                   config: Optional[EngineConfig] = None, seed: Optional[int] = None) -> pd.DataFrame:
    """Every ordered (X, O) pairing plays `games` games with fresh strategy instances."""
    if games < 1:
        raise ValueError("games must be >= 1")
    kinds = list(kinds)
    cfg = config or EngineConfig()
    base_seed = seed if seed is not None else cfg.seed
    rows = []
    for pair_idx, (kx, ko) in enumerate(itertools.product(kinds, repeat=2)):
        rx = random.Random(None if base_seed is None else base_seed * 1000 + 2 * pair_idx)
        ro = random.Random(None if base_seed is None else base_seed * 1000 + 2 * pair_idx + 1)
        x_strategy = make_strategy(kx, cfg, rng=rx)
        o_strategy = make_strategy(ko, cfg, rng=ro)
        x_wins = o_wins = draws = 0
        for _ in range(games):
            outcome, _ = play_game(x_strategy, o_strategy)
            if outcome.is_draw:
                draws += 1
            elif outcome.winner == Player.X:
                x_wins += 1
            else:
                o_wins += 1
        log.info("%s (X) vs %s (O): W:%d D:%d L:%d", kx.slug, ko.slug, x_wins, draws, o_wins)
        rows.append({"x": kx.slug, "o": ko.slug, "games": games,
                     "x_wins": x_wins, "o_wins": o_wins, "draws": draws})

    df = pd.DataFrame(rows, columns=["x", "o", "games", "x_wins", "o_wins", "draws"])
    df["x_win_rate"] = df["x_wins"] / df["games"]
    df["draw_rate"] = df["draws"] / df["games"]
    return df.reset_index(drop=True)
