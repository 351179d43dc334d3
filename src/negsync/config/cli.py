"""Command line settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "NEGSYNC_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


@dataclass(frozen=True, slots=True)
class CliConfig:
    log_level: int = logging.INFO


def _parse_log_level(raw: str) -> int:
    level = _LEVELS.get(raw.strip().upper())
    if level is None:
        allowed = ", ".join(_LEVELS)
        raise ConfigurationError(f"Invalid {LOG_LEVEL_ENV}={raw!r} (expected one of: {allowed})")
    return level


def get_cli_config() -> CliConfig:
    raw = os.getenv(LOG_LEVEL_ENV)
    if raw is None or not raw.strip():
        raw = DEFAULT_LOG_LEVEL
    return CliConfig(log_level=_parse_log_level(raw))
