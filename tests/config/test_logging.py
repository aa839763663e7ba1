"""Tests for structlog routing of slackfield log records."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from slackfield.config.logging import PACKAGE_LOGGER, configure_logging
from slackfield.domain.errors import FieldSchemaError, MarkdownContentError
from slackfield.domain.field import Field


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg_level = pkg.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    pkg.setLevel(pkg_level)


def _json_lines(err: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestLevels:
    def test_verbose(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(log_json=False)
        configure_logging(log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestRendering:
    def test_console_mode_smoke(self) -> None:
        configure_logging(verbose=True)
        structlog.get_logger("slackfield.test").warning("console line", key="val")

    def test_structlog_event_as_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        structlog.get_logger("slackfield.test").warning("json test", answer=42)
        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "slackfield.test"
        assert "timestamp" in parsed


class TestFieldRejections:
    def test_schema_rejection_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with pytest.raises(FieldSchemaError):
            Field.from_wire({"title": "T"})
        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "Rejected Field wire input with 1 error(s)"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "slackfield.domain.field"

    def test_markdown_rejection_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with pytest.raises(MarkdownContentError):
            Field.of("Status", "`down`")
        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "Markdown found in text: code"
        assert parsed["logger"] == "slackfield.domain.markdown"

    def test_silent_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        with pytest.raises(FieldSchemaError):
            Field.from_wire({"title": "T"})
        assert capfd.readouterr().err == ""
