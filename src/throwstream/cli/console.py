# topmark:header:start
#
#   project      : ThrowStream
#   file         : console.py
#   file_relpath : src/throwstream/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module separates CLI output from internal logging. Use the console for
messages intended for end users, while reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output (defaults to sys.stdout).
        err (TextIO | None): Stream for error output (defaults to sys.stderr).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by ``click.style``.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
