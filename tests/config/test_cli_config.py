from __future__ import annotations

import logging

import pytest

from negsync.config import CliConfig, ConfigurationError, get_cli_config


def test_cli_config_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NEGSYNC_LOG_LEVEL", raising=False)

    assert get_cli_config() == CliConfig(log_level=logging.INFO)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("Error", logging.ERROR),
        ("   ", logging.INFO),
    ],
)
def test_cli_config_reads_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
) -> None:
    monkeypatch.setenv("NEGSYNC_LOG_LEVEL", raw)

    assert get_cli_config().log_level == expected


def test_cli_config_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEGSYNC_LOG_LEVEL", "verbose")

    with pytest.raises(ConfigurationError) as exc:
        get_cli_config()

    assert "NEGSYNC_LOG_LEVEL" in str(exc.value)
