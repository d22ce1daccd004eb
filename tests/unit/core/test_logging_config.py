"""Unit tests for structured logging setup."""

from __future__ import annotations

import json

import pytest
import structlog

from core.logging_config import configure_logging, get_logger


def test_cached_logger_follows_replaced_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """A logger cached on first use should still write to the current stderr."""
    logger = get_logger("headerseek.test")
    logger.info("first_event")
    capsys.readouterr()

    logger.info("second_event", step=2)
    lines = capsys.readouterr().err.strip().splitlines()

    assert [json.loads(line)["event"] for line in lines] == ["second_event"]
    assert json.loads(lines[0])["level"] == "info"


def test_configure_logging_runs_once() -> None:
    """Repeated logger lookups should not rebuild the structlog config."""
    get_logger("headerseek.first")
    factory = structlog.get_config()["logger_factory"]

    configure_logging()
    get_logger("headerseek.second")

    assert structlog.get_config()["logger_factory"] is factory
    assert structlog.get_config()["cache_logger_on_first_use"] is True
