"""
strategies/minimax.py
Exhaustive minimax and alpha-beta search over the full game tree.

Scores are from the perspective of the player who owns the search:
    10 - depth   owner wins   (prefer faster wins)
    depth - 10   owner loses  (prefer slower losses)
    0            draw
Depth starts at 0 on the board right after the owner's candidate move.
Both searches play on one mutable board copy (place / recurse / undo).
"""

from __future__ import annotations
import logging
import math
import random
from typing import Dict, Optional, Tuple

from ..board import EMPTY, Board, Player
from ..config import SearchConfig
from ..outcome import winner
from .base import Strategy, StrategyInfo

log = logging.getLogger(__name__)

WIN_SCORE = 10


def terminal_score(board: Board, depth: int, owner: Player) -> Optional[int]:
    w = winner(board)
    if w is not None:
        return WIN_SCORE - depth if w == owner else depth - WIN_SCORE
    if board.is_full():
        return 0
    return None


def _pick_best(scores: Dict[int, int]) -> Optional[int]:
    """First (lowest) index holding the maximum score."""
    best_mv, best_sc = None, -math.inf
    for mv in sorted(scores):
        if scores[mv] > best_sc:
            best_sc, best_mv = scores[mv], mv
    return best_mv


class MinimaxStrategy(Strategy):
    info = StrategyInfo(
        name="Minimax",
        description="Explores all possible game states to find optimal moves, assuming perfect play from opponent",
        historical_context="Game theory algorithm developed by John von Neumann (1928)",
    )

    def __init__(self, config: Optional[SearchConfig] = None, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.config = config or SearchConfig()
        self.last_nodes = 0

    def minimax(self, b: Board, depth: int, maximizing: bool, owner: Player,
                memo: Optional[Dict[Tuple[Tuple[int, ...], bool], int]] = None) -> int:
        self.last_nodes += 1
        key = (tuple(b.cells), maximizing) if memo is not None else None
        if key is not None and key in memo:
            return memo[key]

        score = terminal_score(b, depth, owner)
        if score is None:
            mover = int(owner) if maximizing else int(owner.next)
            best = -math.inf if maximizing else math.inf
            for i in b.empty_cells():
                b.cells[i] = mover
                val = self.minimax(b, depth + 1, not maximizing, owner, memo)
                b.cells[i] = EMPTY
                if maximizing and val > best:
                    best = val
                if (not maximizing) and val < best:
                    best = val
            score = int(best)

        if key is not None:
            memo[key] = score
        return score

    def score_moves(self, board: Board, player: Player) -> Dict[int, int]:
        """Exact depth-adjusted score of every legal move for `player`."""
        # depth is implied by the occupied cells, so a memo is valid for one root only
        memo = {} if self.config.use_cache else None
        self.last_nodes = 0
        b = board.copy()
        scores: Dict[int, int] = {}
        for i in b.empty_cells():
            b.cells[i] = int(player)
            scores[i] = self.minimax(b, 0, False, player, memo)
            b.cells[i] = EMPTY
        log.debug("minimax %s for %s: %d nodes, scores=%s", board.state_key(), player.symbol, self.last_nodes, scores)
        return scores

    def evaluate(self, board: Board, player: Player) -> Optional[int]:
        scores = self.score_moves(board, player)
        return max(scores.values()) if scores else None

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        return _pick_best(self.score_moves(board, player))


class AlphaBetaStrategy(Strategy):
    info = StrategyInfo(
        name="Alpha-Beta Pruning",
        description="Optimized minimax that prunes branches that won't affect the final decision",
        historical_context="Optimization developed in the 1950s, popularized by chess programs",
    )

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.last_nodes = 0

    def alpha_beta(self, b: Board, depth: int, alpha: float, beta: float, maximizing: bool, owner: Player) -> int:
        self.last_nodes += 1
        score = terminal_score(b, depth, owner)
        if score is not None:
            return score

        if maximizing:
            best = -math.inf
            for i in b.empty_cells():
                b.cells[i] = int(owner)
                val = self.alpha_beta(b, depth + 1, alpha, beta, False, owner)
                b.cells[i] = EMPTY
                best = max(best, val)
                alpha = max(alpha, val)
                if beta <= alpha:
                    break  # prune
        else:
            best = math.inf
            for i in b.empty_cells():
                b.cells[i] = int(owner.next)
                val = self.alpha_beta(b, depth + 1, alpha, beta, True, owner)
                b.cells[i] = EMPTY
                best = min(best, val)
                beta = min(beta, val)
                if beta <= alpha:
                    break  # prune
        return int(best)

    def _search_root(self, board: Board, player: Player) -> Tuple[Optional[int], Optional[int]]:
        """(best move, position value) with the root alpha carried across candidates."""
        self.last_nodes = 0
        b = board.copy()
        alpha = -math.inf
        best_mv, best_sc = None, -math.inf
        for i in b.empty_cells():
            b.cells[i] = int(player)
            sc = self.alpha_beta(b, 0, alpha, math.inf, False, player)
            b.cells[i] = EMPTY
            if sc > best_sc:
                best_sc, best_mv = sc, i
            alpha = max(alpha, sc)
        log.debug("alpha-beta %s for %s: %d nodes, move=%s value=%s",
                  board.state_key(), player.symbol, self.last_nodes, best_mv, best_sc)
        if best_mv is None:
            return None, None
        return best_mv, int(best_sc)

    def score_moves(self, board: Board, player: Player) -> Dict[int, int]:
        """Exact score per legal move (each candidate gets a full window)."""
        self.last_nodes = 0
        b = board.copy()
        scores: Dict[int, int] = {}
        for i in b.empty_cells():
            b.cells[i] = int(player)
            scores[i] = self.alpha_beta(b, 0, -math.inf, math.inf, False, player)
            b.cells[i] = EMPTY
        return scores

    def evaluate(self, board: Board, player: Player) -> Optional[int]:
        return self._search_root(board, player)[1]

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        return self._search_root(board, player)[0]
