"""
strategies/qlearning.py
Epsilon-greedy action choice over a tabular Q-function.

The table maps canonical state keys ('X_O______') to {cell: value}. Nothing in
move selection writes to it; it starts empty unless loaded from a JSON file
produced by an external training run, so play is near-random until then.
"""

from __future__ import annotations
import json
import logging
import random
from pathlib import Path
from typing import Dict, Iterator, Optional

from ..board import CELLS, Board, Player
from ..config import QLearningConfig
from .base import Strategy, StrategyInfo

log = logging.getLogger(__name__)


class QTable:
    def __init__(self, data: Optional[Dict[str, Dict[int, float]]] = None):
        self._q: Dict[str, Dict[int, float]] = {}
        for state, actions in (data or {}).items():
            for action, value in actions.items():
                self.set(state, int(action), float(value))

    def get(self, state: str, action: int) -> float:
        return self._q.get(state, {}).get(action, 0.0)

    def set(self, state: str, action: int, value: float) -> None:
        if not 0 <= action < CELLS:
            raise ValueError(f"Action {action} out of range 0..{CELLS - 1}")
        self._q.setdefault(state, {})[action] = value

    def actions(self, state: str) -> Dict[int, float]:
        return dict(self._q.get(state, {}))

    def __contains__(self, state: str) -> bool:
        return bool(self._q.get(state))

    def __len__(self) -> int:
        return len(self._q)

    def __iter__(self) -> Iterator[str]:
        return iter(self._q)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {s: {str(a): v for a, v in acts.items()} for s, acts in self._q.items()}

    def save(self, path: str) -> None:
        Path(path).write_text(json.dumps(self.to_dict(), indent=2, sort_keys=True), encoding="utf-8")

    @classmethod
    def load(cls, path: str) -> "QTable":
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: expected an object of state -> {{action: value}}")
        table = cls()
        skipped = 0
        for state, actions in raw.items():
            if len(state) != CELLS or not isinstance(actions, dict):
                skipped += 1
                continue
            for action, value in actions.items():
                try:
                    table.set(state, int(action), float(value))
                except (TypeError, ValueError):
                    skipped += 1
        if skipped:
            log.warning("%s: skipped %d malformed Q-table entries", path, skipped)
        log.debug("loaded Q-table with %d states from %s", len(table), path)
        return table


class QLearningStrategy(Strategy):
    info = StrategyInfo(
        name="Q-Learning",
        description="Reinforcement learning that learns optimal moves through experience and rewards",
        historical_context="Reinforcement learning breakthrough by Watkins (1989)",
    )

    def __init__(self, config: Optional[QLearningConfig] = None, rng: Optional[random.Random] = None,
                 table: Optional[QTable] = None):
        super().__init__(rng)
        self.config = config or QLearningConfig()
        self.config.validate()
        if table is None and self.config.table_path:
            table = QTable.load(self.config.table_path)
        self.table = table if table is not None else QTable()

    def find_move(self, board: Board, player: Player) -> Optional[int]:
        available = board.empty_cells()
        if not available:
            return None
        if self.rng.random() < self.config.epsilon:
            return self.rng.choice(available)

        state = board.state_key()
        if state not in self.table:
            return self.rng.choice(available)
        best_mv, best_q = available[0], self.table.get(state, available[0])
        for mv in available[1:]:
            q = self.table.get(state, mv)
            if q > best_q:
                best_mv, best_q = mv, q
        return best_mv
