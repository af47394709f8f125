"""Unit tests for ecs.config."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ecs.config import Settings, configure_logging, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.lower_threshold == 5
    assert settings.upper_threshold == 25
    assert settings.log_level == "info"
    assert settings.debug is False


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ECS_LOWER_THRESHOLD", "12")
    monkeypatch.setenv("ECS_UPPER_THRESHOLD", "18")
    settings = Settings(_env_file=None)
    assert (settings.lower_threshold, settings.upper_threshold) == (12, 18)


def test_inverted_thresholds_rejected() -> None:
    with pytest.raises(ValidationError, match="must not exceed"):
        Settings(_env_file=None, lower_threshold=30, upper_threshold=20)


def test_equal_thresholds_allowed() -> None:
    settings = Settings(_env_file=None, lower_threshold=21, upper_threshold=21)
    assert settings.lower_threshold == settings.upper_threshold


def test_log_level_normalized() -> None:
    assert Settings(_env_file=None, log_level=" WARNING ").log_level == "warning"


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


@pytest.mark.usefixtures("clear_settings_cache")
def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_uses_configured_level(self) -> None:
        with patch("ecs.config.logging.basicConfig") as basic_config:
            configure_logging(Settings(_env_file=None, log_level="warning"))
        assert basic_config.call_args.kwargs["level"] == logging.WARNING
        assert basic_config.call_args.kwargs["format"] == (
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    def test_debug_overrides_level(self) -> None:
        with patch("ecs.config.logging.basicConfig") as basic_config:
            configure_logging(Settings(_env_file=None, debug=True, log_level="error"))
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
