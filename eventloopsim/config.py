"""Simulation settings.

Defaults match the classic demo: the clock feed fires every 500 ms of wall
time and takes 500 ms off every pending timer. Each value can be overridden
from the environment with the ``EVENTLOOPSIM_`` prefix.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

ENV_PREFIX = "EVENTLOOPSIM"


class ConfigError(ValueError):
    pass


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_int(name: str, default: int, *, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer (got {raw!r})") from e
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum} (got {value})")
    return value


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{name} is not a logging level (got {raw!r})")
    return level


@dataclass(frozen=True)
class SimulationConfig:
    tick_interval_ms: int = 500
    tick_decrement_ms: int = 500
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "SimulationConfig":
        return SimulationConfig(
            tick_interval_ms=_env_int(_k("TICK_INTERVAL_MS"), 500, minimum=1),
            tick_decrement_ms=_env_int(_k("TICK_DECREMENT_MS"), 500, minimum=0),
            log_level=_env_log_level(_k("LOG_LEVEL"), "INFO"),
        )
