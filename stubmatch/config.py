"""Configuration management for stubmatch.

Loads settings from environment variables with sensible defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class StubMatchConfig:
    """Engine configuration shared by every mock object created afterwards."""
    thread_safe: bool = True  # guard each engine with a lock
    log_level: str = "WARNING"
    max_repr_length: int = 80  # truncation for values in failure messages

    @classmethod
    def from_env(cls) -> "StubMatchConfig":
        return cls(
            thread_safe=os.getenv("STUBMATCH_THREAD_SAFE", "1").strip().lower() in _TRUTHY,
            log_level=os.getenv("STUBMATCH_LOG_LEVEL", "WARNING").upper(),
            max_repr_length=int(os.getenv("STUBMATCH_MAX_REPR", "80")),
        )


_config: StubMatchConfig | None = None


def get_config() -> StubMatchConfig:
    """Return the process-wide config, loading it from the environment once."""
    global _config
    if _config is None:
        _config = StubMatchConfig.from_env()
    return _config


def set_config(config: StubMatchConfig | None) -> None:
    """Replace the process-wide config; ``None`` reloads from the environment."""
    global _config
    _config = config


def configure_logging(config: StubMatchConfig | None = None) -> None:
    """Apply ``log_level`` via ``logging.basicConfig`` (scripts only)."""
    config = config or get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
