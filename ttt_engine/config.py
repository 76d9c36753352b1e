"""
config.py
Dataclass configs for every strategy plus the host session.

A JSON file with the same nested shape can override any default:

    {
      "seed": 7,
      "mcts": {"iterations": 500},
      "modeled_mcts": {"iterations": 800, "likelihood": {"optimal_hit": 0.7}},
      "qlearning": {"epsilon": 0.0, "table_path": "q_table.json"},
      "session": {"ai_delay": 0.3}
    }
"""

from __future__ import annotations
import json
from dataclasses import asdict, dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union, get_args, get_origin, get_type_hints


@dataclass
class SearchConfig:
    use_cache: bool = True  # minimax transposition cache (alpha-beta never caches)


@dataclass
class MCTSConfig:
    iterations: int = 1000  # playouts per candidate move

    def validate(self) -> None:
        if self.iterations < 1:
            raise ValueError("iterations must be >= 1")


@dataclass
class LikelihoodConfig:
    greedy_hit: float = 0.9
    greedy_miss: float = 0.02
    defensive_hit: float = 0.9
    defensive_miss: float = 0.02
    optimal_hit: float = 0.8
    optimal_miss: float = 0.05

    def validate(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"likelihood.{f.name} must be >= 0")


@dataclass
class ModeledMCTSConfig:
    iterations: int = 2000
    likelihood: LikelihoodConfig = field(default_factory=LikelihoodConfig)

    def validate(self) -> None:
        if self.iterations < 1:
            raise ValueError("iterations must be >= 1")
        self.likelihood.validate()


@dataclass
class QLearningConfig:
    epsilon: float = 0.1
    table_path: Optional[str] = None  # JSON produced by an external trainer

    def validate(self) -> None:
        if not 0.0 <= self.epsilon <= 1.0:
            raise ValueError("epsilon must be within [0, 1]")


@dataclass
class SessionConfig:
    ai_delay: float = 0.4  # seconds, pacing only

    def validate(self) -> None:
        if self.ai_delay < 0:
            raise ValueError("ai_delay must be >= 0")


@dataclass
class EngineConfig:
    seed: Optional[int] = None
    search: SearchConfig = field(default_factory=SearchConfig)
    mcts: MCTSConfig = field(default_factory=MCTSConfig)
    modeled_mcts: ModeledMCTSConfig = field(default_factory=ModeledMCTSConfig)
    qlearning: QLearningConfig = field(default_factory=QLearningConfig)
    session: SessionConfig = field(default_factory=SessionConfig)

    def validate(self) -> "EngineConfig":
        for f in fields(self):
            sub = getattr(self, f.name)
            if hasattr(sub, "validate"):
                sub.validate()
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        return _build(cls, data, "config").validate()


def _accepts(value: Any, hint: Any) -> bool:
    if get_origin(hint) is Union:
        return any(_accepts(value, arg) for arg in get_args(hint))
    if hint is type(None):
        return value is None
    if hint is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if hint is float:
        return isinstance(value, (int, float))
    return isinstance(value, hint)


def _build(klass, data: Dict[str, Any], where: str):
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")
    known = {f.name: f for f in fields(klass)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ValueError(f"{where}: unknown keys {unknown}")
    hints = get_type_hints(klass)
    kwargs = {}
    default = klass()
    for name, value in data.items():
        current = getattr(default, name)
        if is_dataclass(current):
            kwargs[name] = _build(type(current), value, f"{where}.{name}")
        elif not _accepts(value, hints[name]):
            raise ValueError(f"{where}.{name}: unexpected {type(value).__name__} value {value!r}")
        else:
            kwargs[name] = value
    return klass(**kwargs)


def load_config(path: Optional[str] = None) -> EngineConfig:
    if path is None:
        return EngineConfig().validate()
    with open(Path(path), "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}: not valid JSON ({e})") from e
    return EngineConfig.from_dict(raw)
