# topmark:header:start
#
#   project      : ThrowStream
#   file         : exit_codes.py
#   file_relpath : src/throwstream/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the ThrowStream CLI.

Codes follow the BSD ``sysexits.h`` convention where one applies.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ThrowStream CLI.

    Attributes:
        SUCCESS (int): The command completed without errors.
        FAILURE (int): The command ran but reported an error (e.g. the demo raised).
        USAGE_ERROR (int): Invalid flags or arguments.
        CONFIG_ERROR (int): A configuration file could not be used.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
