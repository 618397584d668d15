# topmark:header:start
#
#   project      : ThrowStream
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli
from throwstream.constants import THROWSTREAM_VERSION


def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == THROWSTREAM_VERSION


def test_version_verbose_adds_heading() -> None:
    """With ``-v`` the version is introduced by a heading."""
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert "ThrowStream version:" in result.output
    assert THROWSTREAM_VERSION in result.output


def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON."""
    result = run_cli(["--no-color", "version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": THROWSTREAM_VERSION}
