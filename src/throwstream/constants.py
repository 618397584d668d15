# topmark:header:start
#
#   project      : ThrowStream
#   file         : constants.py
#   file_relpath : src/throwstream/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

THROWSTREAM_VERSION: str = get_version("throwstream")

# Environment variables
ENV_LOG_LEVEL: str = "THROWSTREAM_LOG_LEVEL"
ENV_EXCEPTION_SOURCE: str = "THROWSTREAM_EXCEPTIONSOURCE"

# Configuration files and sections
DEFAULT_TOML_CONFIG_NAME: str = "throwstream.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: tuple[str, ...] = ("tool", "throwstream")

# Provenance record layout: "\n( <file>:<line> , in <function>() )    ->  "
RECORD_SEPARATOR: str = "\n"
RECORD_TEMPLATE: str = "( {file}:{line} , in {function}() )    ->  "
