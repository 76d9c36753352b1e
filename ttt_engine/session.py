"""
session.py
Host-side game loop: owns the board, serializes human moves with the single
delayed AI move, and keeps a running scoreboard.

The AI move runs on a threading.Timer. Each scheduled move captures the session
token; reset() bumps the token so a computation that finishes after a reset is
dropped instead of landing on the new board. Until that computation returns, no
new AI move is accepted, so a strategy instance never runs two find_move calls at once.
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import CELLS, Board, Player
from .outcome import IN_PROGRESS, Outcome, Status, detect
from .strategies.base import Strategy

log = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    human_wins: int = 0
    ai_wins: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.human_wins + self.ai_wins + self.draws

    def record(self, outcome: Outcome, human: Player) -> None:
        if outcome.status is Status.DRAW:
            self.draws += 1
        elif outcome.status is Status.WIN:
            if outcome.winner == human:
                self.human_wins += 1
            else:
                self.ai_wins += 1

    def reset(self) -> None:
        self.human_wins = self.ai_wins = self.draws = 0

    def __str__(self) -> str:
        return f"You {self.human_wins} | Draws {self.draws} | AI {self.ai_wins}"


class GameSession:
    def __init__(self, strategy: Strategy, human: Player = Player.X, ai_delay: float = 0.4,
                 scoreboard: Optional[Scoreboard] = None):
        if ai_delay < 0:
            raise ValueError("ai_delay must be >= 0")
        self.strategy = strategy
        self.human = human
        self.ai = human.next
        self.ai_delay = ai_delay
        self.scoreboard = scoreboard if scoreboard is not None else Scoreboard()

        self._lock = threading.RLock()
        self._idle = threading.Condition(self._lock)
        self._token = 0
        self._pending: Optional[threading.Timer] = None
        self._computing = False  # a find_move call is in flight, possibly for a reset game
        self._board = Board()
        self._current = Player.X
        self._outcome: Outcome = IN_PROGRESS
        self.history: List[Tuple[Player, int]] = []

    # ---- read-only views ----
    @property
    def board(self) -> Board:
        with self._lock:
            return self._board.copy()

    @property
    def current_player(self) -> Player:
        with self._lock:
            return self._current

    @property
    def outcome(self) -> Outcome:
        with self._lock:
            return self._outcome

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def ai_pending(self) -> bool:
        with self._lock:
            return self._pending is not None or self._computing

    @property
    def status_message(self) -> str:
        with self._lock:
            o = self._outcome
            if o.status is Status.WIN:
                return "You Win!" if o.winner == self.human else "AI Wins!"
            if o.status is Status.DRAW:
                return "Draw!"
            return "Your Turn" if self._current == self.human else "AI's Turn"

    # ---- host actions ----
    def reset(self) -> None:
        """Start a new game; any pending AI move is cancelled or discarded."""
        with self._lock:
            self._token += 1
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
            self._board = Board()
            self._current = Player.X
            self._outcome = IN_PROGRESS
            self.history = []
            self._idle.notify_all()

    def human_move(self, index: int) -> bool:
        with self._lock:
            if self._pending is not None or self._computing or self._outcome.is_terminal or self._current != self.human:
                return False
            if not 0 <= index < CELLS or not self._board.is_empty(index):
                return False
            before = self._board.copy()
            self._apply(index, self.human)
            update = getattr(self.strategy, "update_opponent_model", None)
            if update is not None:
                update(index, before, self.human)
            if not self._outcome.is_terminal:
                self._schedule_ai()
            return True

    def ai_first(self) -> bool:
        """Schedule the AI's move when it is the AI's turn (AI playing X)."""
        with self._lock:
            if self._pending is not None or self._computing or self._outcome.is_terminal or self._current != self.ai:
                return False
            self._schedule_ai()
            return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until no AI move is pending or running; False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: self._pending is None and not self._computing, timeout)

    # ---- internals ----
    def _apply(self, index: int, player: Player) -> None:
        self._board.place(index, player)
        self.history.append((player, index))
        self._outcome = detect(self._board)
        if self._outcome.is_terminal:
            self.scoreboard.record(self._outcome, self.human)
        else:
            self._current = player.next

    def _schedule_ai(self) -> None:
        token = self._token
        timer = threading.Timer(self.ai_delay, self._run_ai, args=(token,))
        timer.daemon = True
        self._pending = timer
        timer.start()

    def _run_ai(self, token: int) -> None:
        with self._lock:
            if token != self._token:
                return
            board = self._board.copy()
            player = self._current
            self._computing = True

        try:
            move = self.strategy.find_move(board, player)
        except Exception:
            # the game stays on the AI's turn; ai_first() retries
            log.exception("strategy %s failed to produce a move", self.strategy.name)
            with self._lock:
                self._computing = False
                if token == self._token:
                    self._pending = None
                self._idle.notify_all()
            return

        with self._lock:
            self._computing = False
            if token != self._token:
                log.debug("discarding stale AI move %s from an earlier game", move)
                self._idle.notify_all()
                return
            self._pending = None
            if move is not None:
                self._apply(move, player)
            self._idle.notify_all()
