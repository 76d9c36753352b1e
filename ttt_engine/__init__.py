"""
ttt_engine: 3x3 tic-tac-toe move selection with seven interchangeable strategies.
"""

from .board import Board, Player
from .config import EngineConfig, load_config
from .outcome import WIN_PATTERNS, Outcome, Status, detect, winning_move
from .session import GameSession, Scoreboard
from .strategies import Strategy, StrategyInfo, StrategyKind, make_strategy

__version__ = "0.1.0"

__all__ = [
    "Board", "EngineConfig", "GameSession", "Outcome", "Player", "Scoreboard",
    "Status", "Strategy", "StrategyInfo", "StrategyKind", "WIN_PATTERNS",
    "detect", "load_config", "make_strategy", "winning_move",
]
