"""Application configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PORT = "8080"
DEFAULT_LOG_LEVEL = "info"
DEFAULT_GIN_MODE = "debug"


@dataclass(frozen=True)
class Config:
    """Settings for the HTTP server."""

    port: str = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    gin_mode: str = DEFAULT_GIN_MODE


def _env(key: str, fallback: str) -> str:
    """Return the variable's value, or the fallback when it is unset or empty."""
    return os.environ.get(key) or fallback


def load() -> Config:
    """Build a Config from PORT, LOG_LEVEL and GIN_MODE, with defaults."""
    return Config(
        port=_env("PORT", DEFAULT_PORT),
        log_level=_env("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        gin_mode=_env("GIN_MODE", DEFAULT_GIN_MODE),
    )