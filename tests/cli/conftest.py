# topmark:header:start
#
#   project      : ThrowStream
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ThrowStream through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from throwstream.cli.exit_codes import ExitCode
from throwstream.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Mapping


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["demo", "--a", "3"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input, used to
            answer interactive prompts.
        env (Mapping[str, str | None] | None): Environment overrides for the invocation.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
