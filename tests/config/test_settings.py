"""Tests for SlackFieldSettings — explicit values only."""

import logging

import pytest

from slackfield.config.settings import SlackFieldSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = SlackFieldSettings()
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = SlackFieldSettings()
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestExplicitValues:
    def test_kwargs(self) -> None:
        settings = SlackFieldSettings(verbose=True, log_json=True)
        assert settings.verbose is True
        assert settings.log_json is True

    def test_environment_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERBOSE", "true")
        monkeypatch.setenv("SLACKFIELD_VERBOSE", "true")
        monkeypatch.setenv("LOG_JSON", "1")
        settings = SlackFieldSettings()
        assert settings.verbose is False
        assert settings.log_json is False


class TestConfigureLogging:
    def test_applies_verbosity(self) -> None:
        root = logging.getLogger()
        original_handlers = root.handlers[:]
        pkg = logging.getLogger("slackfield")
        original_level = pkg.level
        try:
            SlackFieldSettings(verbose=True).configure_logging()
            assert pkg.level == logging.DEBUG
        finally:
            root.handlers = original_handlers
            pkg.setLevel(original_level)
