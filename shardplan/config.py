"""
Runtime settings read from SHARDPLAN_* environment variables
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "SHARDPLAN_"


def _int_env(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    num_nodes: int = 4
    num_users: int = 100
    num_orders: int = 200
    seed: Optional[int] = None
    preview_rows: int = 10
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings, falling back to defaults for unset variables"""
        if env is None:
            env = os.environ
        defaults = cls()
        return cls(
            num_nodes=_int_env(env, "NODES", defaults.num_nodes),
            num_users=_int_env(env, "USERS", defaults.num_users),
            num_orders=_int_env(env, "ORDERS", defaults.num_orders),
            seed=_int_env(env, "SEED", defaults.seed),
            preview_rows=_int_env(env, "PREVIEW_ROWS", defaults.preview_rows),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )
