"""
Configuration for the simulation driver.

Values come from the environment (optionally loaded from a ``.env`` file):

- SNAKE_WIDTH: board rows (default 20)
- SNAKE_HEIGHT: board columns (default 20)
- SNAKE_FOOD_TARGET: food to eat to win (default 10)
- SNAKE_INITIAL_SCORE: starting score (default 0)
- SNAKE_MAX_ROUNDS: stop a simulation after this many moves (default 1000)
- SNAKE_PLAYER: player key, see players.AVAILABLE_PLAYERS (default 'greedy')
- SNAKE_LOG_LEVEL: logging level name for the CLI (default 'INFO')
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} environment variable must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class SimulationSettings:
    width: int = 20
    height: int = 20
    food_target: int = 10
    initial_score: int = 0
    max_rounds: int = 1000
    player: str = "greedy"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "SimulationSettings":
        """Build settings from ``env`` (defaults to ``os.environ``)."""
        if env is None:
            env = os.environ
        defaults = cls()
        return cls(
            width=_int_env(env, "SNAKE_WIDTH", defaults.width),
            height=_int_env(env, "SNAKE_HEIGHT", defaults.height),
            food_target=_int_env(env, "SNAKE_FOOD_TARGET", defaults.food_target),
            initial_score=_int_env(env, "SNAKE_INITIAL_SCORE", defaults.initial_score),
            max_rounds=_int_env(env, "SNAKE_MAX_ROUNDS", defaults.max_rounds),
            player=env.get("SNAKE_PLAYER") or defaults.player,
            log_level=(env.get("SNAKE_LOG_LEVEL") or defaults.log_level).upper(),
        )

    def override(self, **changes) -> "SimulationSettings":
        """Return a copy with every non-None value in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
