# topmark:header:start
#
#   project      : ThrowStream
#   file         : logging.py
#   file_relpath : src/throwstream/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom ThrowStream logging with TRACE logging.

This module extends the standard logging module with ThrowStream-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from throwstream.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class ThrowstreamLogger(logging.Logger):
    """Custom logger class for ThrowStream with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(ThrowstreamLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        # Lower than TRACE
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors THROWSTREAM_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(ENV_LOG_LEVEL)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Log to stderr so program output on stdout stays clean
    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> ThrowstreamLogger:
    """Retrieve a ThrowstreamLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        ThrowstreamLogger: A ThrowstreamLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("ThrowstreamLogger", logger)
