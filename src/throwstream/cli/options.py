# topmark:header:start
#
#   project      : ThrowStream
#   file         : options.py
#   file_relpath : src/throwstream/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config file) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from throwstream.cli.errors import ThrowstreamConfigError, ThrowstreamUsageError
from throwstream.config.logging import TRACE_LEVEL
from throwstream.config.model import StreamConfig, resolve_config

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as a `logging` integer.

    Raises:
        ThrowstreamUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ThrowstreamUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def resolve_color(*, no_color: bool, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        no_color: Whether ``--no-color`` was passed.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        ``--no-color`` wins, then ``FORCE_COLOR`` (not ``"0"``), then ``NO_COLOR``,
        then whether stdout is a TTY.
    """
    if no_color:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def load_cli_config(config_path: Path | None, *, no_source: bool = False) -> StreamConfig:
    """Resolve the effective config for a command.

    Args:
        config_path: Optional TOML file given with ``--config``.
        no_source: Whether ``--no-source`` was passed; it overrides every other layer.

    Returns:
        The effective `StreamConfig`.

    Raises:
        ThrowstreamConfigError: If ``config_path`` does not point to a file.
    """
    if config_path is not None and not config_path.is_file():
        raise ThrowstreamConfigError(f"Config file not found: {config_path}")
    config: StreamConfig = resolve_config(config_path)
    if no_source:
        config = StreamConfig(include_source_location=False)
    return config


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --no-color option to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --config option to a command."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="TOML config file (throwstream.toml or pyproject.toml with [tool.throwstream]).",
    )(f)
