"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the analyzer's environment variables (optionally from a `.env` file at
the project root).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Container for analyzer configuration read from the environment.

    Attributes:
        data_path: Default registry CSV when none is given on the command line.
        log_path: Optional log file; console logging is always on.
        log_level: Numeric logging level.
        strict_load: Abort the load on the first malformed line when True,
            skip and report malformed lines when False.
        history_size: Maximum number of shell commands remembered, or None
            for no limit.
    """
    data_path: Path | None
    log_path: Path | None
    log_level: int
    strict_load: bool
    history_size: int | None


def _optional_path(name: str) -> Path | None:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else None


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise RuntimeError(f"REGISTRY_LOG_LEVEL has unknown level name: {raw!r}")
    return level


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise RuntimeError(f"REGISTRY_STRICT_LOAD must be a boolean, got {raw!r}")


def _parse_history_size(raw: str) -> int | None:
    if not raw:
        return None
    try:
        size = int(raw)
    except ValueError:
        raise RuntimeError(f"REGISTRY_HISTORY_SIZE must be an integer, got {raw!r}") from None
    if size <= 0:
        raise RuntimeError("REGISTRY_HISTORY_SIZE must be positive")
    return size


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a variable is set to a value that cannot be parsed.
    """
    return Settings(
        data_path=_optional_path("REGISTRY_DATA_PATH"),
        log_path=_optional_path("REGISTRY_LOG_PATH"),
        log_level=_parse_level(os.getenv("REGISTRY_LOG_LEVEL", "WARNING").strip() or "WARNING"),
        strict_load=_parse_bool(os.getenv("REGISTRY_STRICT_LOAD", "true")),
        history_size=_parse_history_size(os.getenv("REGISTRY_HISTORY_SIZE", "").strip()),
    )
