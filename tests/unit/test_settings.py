"""
Unit tests for PresenceSettings — environment-driven configuration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from presence.settings import PresenceSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PRESENCE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PRESENCE_JSON_LOGS", raising=False)


class TestPresenceSettings:
    """Verify defaults, environment loading and validation."""

    def test_defaults(self) -> None:
        """
        GIVEN no PRESENCE_* environment variables
        WHEN settings are loaded
        THEN the library logs warnings and above to the console renderer.
        """
        settings = PresenceSettings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.json_logs is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN PRESENCE_LOG_LEVEL=debug and PRESENCE_JSON_LOGS=true
        WHEN settings are loaded
        THEN the level is normalized to upper case and JSON output is on.
        """
        monkeypatch.setenv("PRESENCE_LOG_LEVEL", "debug")
        monkeypatch.setenv("PRESENCE_JSON_LOGS", "true")
        settings = PresenceSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True

    def test_reads_env_file(self, tmp_path) -> None:
        """
        GIVEN a .env file with PRESENCE_LOG_LEVEL=ERROR
        WHEN settings are loaded from it
        THEN the file value is used.
        """
        env_file = tmp_path / ".env"
        env_file.write_text("PRESENCE_LOG_LEVEL=ERROR\nUNRELATED=1\n", encoding="utf-8")
        settings = PresenceSettings(_env_file=env_file)
        assert settings.log_level == "ERROR"

    def test_environment_overrides_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("PRESENCE_LOG_LEVEL=ERROR\n", encoding="utf-8")
        monkeypatch.setenv("PRESENCE_LOG_LEVEL", "INFO")
        settings = PresenceSettings(_env_file=env_file)
        assert settings.log_level == "INFO"

    def test_rejects_unknown_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN PRESENCE_LOG_LEVEL=LOUD
        WHEN settings are loaded
        THEN a ValidationError names the bad value.
        """
        monkeypatch.setenv("PRESENCE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError, match="Unknown log level"):
            PresenceSettings(_env_file=None)
