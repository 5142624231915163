"""Tests covering config and environment handling."""

from __future__ import annotations

import logging

import pytest

from quoted_table.config import LOG_LEVEL_ENV, FormatConfig
from quoted_table.logging_config import get_logger, setup_logging


@pytest.mark.smoke
def test_config_defaults(monkeypatch: pytest.MonkeyPatch):
    """Without overrides the single-row quirk is kept and logging is quiet."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    config = FormatConfig()

    assert config.keep_single_row is False
    assert config.resolve_log_level() == "WARNING"


@pytest.mark.smoke
def test_config_level_from_environment(monkeypatch: pytest.MonkeyPatch):
    """The environment variable is used when no level is configured."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")

    assert FormatConfig().resolve_log_level() == "INFO"
    assert FormatConfig(verbose=True).resolve_log_level() == "DEBUG"


@pytest.mark.smoke
def test_config_explicit_level(monkeypatch: pytest.MonkeyPatch):
    """A configured level wins over both the environment and ``verbose``."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")

    config = FormatConfig(verbose=True, log_level="error")

    assert config.resolve_log_level() == "ERROR"


@pytest.mark.smoke
def test_setup_logging_replaces_handler():
    root = logging.getLogger("quoted_table")
    before = len(root.handlers)

    setup_logging("DEBUG")
    setup_logging("DEBUG")

    assert len(root.handlers) <= before + 1
    assert root.level == logging.DEBUG
    setup_logging()


@pytest.mark.smoke
def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")


@pytest.mark.smoke
def test_get_logger_nests_under_package():
    assert get_logger("quoted_table.rows").name == "quoted_table.rows"
    assert get_logger("helpers").name == "quoted_table.helpers"
