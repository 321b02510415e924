"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from json_schema_check.config import LOG_LEVEL_ENV, Settings, load_settings


def test_load_settings_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    """Uses INFO when the environment sets nothing."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.setattr("json_schema_check.config.load_dotenv", lambda: False)
    assert load_settings().log_level == "INFO"


def test_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Normalizes the configured level name."""
    monkeypatch.setenv(LOG_LEVEL_ENV, " debug ")
    assert load_settings().log_level == "DEBUG"


def test_settings_rejects_unknown_level() -> None:
    """Rejects names that are not logging levels."""
    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings(log_level="chatty")
