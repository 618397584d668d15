# topmark:header:start
#
#   project      : ThrowStream
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ThrowStream test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    `throwstream.DEFAULT_CONFIG` is resolved once at import time from the
    environment. Tests that assert on the exact shape of provenance records
    pass an explicit `StreamConfig` instead of relying on it.
"""

from __future__ import annotations

import pytest

from throwstream.config import StreamConfig, logging
from throwstream.constants import ENV_EXCEPTION_SOURCE, ENV_LOG_LEVEL


@pytest.fixture(autouse=True)
def isolate_throwstream_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak ThrowStream settings into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_EXCEPTION_SOURCE, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging so every append shows up in captured logs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def with_source() -> StreamConfig:
    """Config rendering full provenance records."""
    return StreamConfig(include_source_location=True)


@pytest.fixture
def without_source() -> StreamConfig:
    """Config rendering message-only records."""
    return StreamConfig(include_source_location=False)
