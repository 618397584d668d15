# topmark:header:start
#
#   project      : ThrowStream
#   file         : test_config_command.py
#   file_relpath : tests/cli/test_config_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `config` command output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from tests.cli.conftest import assert_SUCCESS, run_cli
from throwstream.constants import ENV_EXCEPTION_SOURCE

if TYPE_CHECKING:
    from pathlib import Path


def _parse(output: str) -> dict[str, Any]:
    return tomlkit.parse(output).unwrap()


def test_config_shows_defaults() -> None:
    """Without overrides the effective config is the defaults."""
    result = run_cli(["--no-color", "config"])
    assert_SUCCESS(result)
    assert _parse(result.output) == {"include_source_location": True}


def test_config_for_pyproject() -> None:
    """``--pyproject`` nests the output under ``[tool.throwstream]``."""
    result = run_cli(["--no-color", "config", "--pyproject"])
    assert_SUCCESS(result)
    assert "[tool.throwstream]" in result.output
    assert _parse(result.output) == {"tool": {"throwstream": {"include_source_location": True}}}


def test_config_reflects_file_and_env(tmp_path: Path) -> None:
    """The file layer applies, and the environment overrides it."""
    cfg = tmp_path / "pyproject.toml"
    cfg.write_text("[tool.throwstream]\ninclude_source_location = false\n", encoding="utf-8")

    result = run_cli(["--no-color", "config", "--config", str(cfg)])
    assert_SUCCESS(result)
    assert _parse(result.output) == {"include_source_location": False}

    result = run_cli(
        ["--no-color", "config", "--config", str(cfg)],
        env={ENV_EXCEPTION_SOURCE: "1"},
    )
    assert_SUCCESS(result)
    assert _parse(result.output) == {"include_source_location": True}


def test_config_with_undecodable_file_falls_back_to_defaults(tmp_path: Path) -> None:
    """A config file with invalid UTF-8 does not crash the command."""
    cfg = tmp_path / "throwstream.toml"
    cfg.write_bytes(b"include_source_location = false\n# \xff\xfe\n")

    result = run_cli(["--no-color", "config", "--config", str(cfg)])
    assert_SUCCESS(result)
    assert _parse(result.stdout) == {"include_source_location": True}
