# topmark:header:start
#
#   project      : ThrowStream
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-capable logging setup in :mod:`throwstream.config.logging`."""

from __future__ import annotations

import logging

import pytest

from throwstream.config.logging import (
    TRACE_LEVEL,
    ThrowstreamLogger,
    get_logger,
    resolve_env_log_level,
)
from throwstream.constants import ENV_LOG_LEVEL


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("FATAL", logging.CRITICAL),
        ("15", 15),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    """Level names and numbers are both understood."""
    monkeypatch.setenv(ENV_LOG_LEVEL, raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No variable means no override."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_trace_capable_logger() -> None:
    """Loggers created through `get_logger` expose `.trace()`."""
    logger = get_logger("throwstream.tests.logging")
    assert isinstance(logger, ThrowstreamLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_is_emitted_only_when_enabled(caplog: pytest.LogCaptureFixture) -> None:
    """TRACE records are dropped above TRACE level and kept at it."""
    logger = get_logger("throwstream.tests.trace")
    with caplog.at_level(logging.DEBUG, logger="throwstream.tests.trace"):
        logger.trace("hidden")
    with caplog.at_level(TRACE_LEVEL, logger="throwstream.tests.trace"):
        logger.trace("shown %d", 1)
    messages = [r.getMessage() for r in caplog.records]
    assert "hidden" not in messages
    assert "shown 1" in messages
