"""Application configuration helpers."""

from __future__ import annotations

from negsync.common.logging import configure_logging

from .cli import CliConfig, get_cli_config
from .errors import ConfigurationError

__all__ = [
    "CliConfig",
    "ConfigurationError",
    "configure_logging",
    "get_cli_config",
]
