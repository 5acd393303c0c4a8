"""Environment-driven calculator configuration and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .history import DEFAULT_HISTORY_LIMIT

ANGLE_MODES = ("deg", "rad")


def env_str(name: str, default: str, *, strip: bool = True) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip() if strip else value


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class CalculatorConfig:
    """Runtime configuration for the calculator.

    Environment variables:
    - SCICALC_ANGLE_MODE: deg|rad, initial angle mode (default: deg)
    - SCICALC_HISTORY_LIMIT: number of history entries kept (default: 40)
    - SCICALC_LOG_LEVEL: logging level name (default: INFO)
    """

    angle_mode: str = "deg"
    history_limit: int = DEFAULT_HISTORY_LIMIT
    log_level: str = "INFO"

    @property
    def use_degrees(self) -> bool:
        return self.angle_mode == "deg"

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        mode = env_str("SCICALC_ANGLE_MODE", "deg").lower()
        if mode not in ANGLE_MODES:
            mode = "deg"
        return cls(
            angle_mode=mode,
            history_limit=max(1, env_int("SCICALC_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)),
            log_level=env_str("SCICALC_LOG_LEVEL", "INFO").upper() or "INFO",
        )


_config: Optional[CalculatorConfig] = None


def get_config() -> CalculatorConfig:
    """Get the calculator configuration (cached)."""
    global _config
    if _config is None:
        _config = CalculatorConfig.from_env()
    return _config


def configure_logging(config: Optional[CalculatorConfig] = None) -> None:
    config = config or get_config()
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
