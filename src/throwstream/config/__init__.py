# topmark:header:start
#
#   project      : ThrowStream
#   file         : __init__.py
#   file_relpath : src/throwstream/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream configuration.

Exposes the immutable `StreamConfig` snapshot, the import-time `DEFAULT_CONFIG`
and the layered `resolve_config` helper. TOML I/O lives in
`throwstream.config.io`; logging setup lives in `throwstream.config.logging`.
"""

from __future__ import annotations

from throwstream.config.model import (
    DEFAULT_CONFIG,
    KEY_INCLUDE_SOURCE_LOCATION,
    StreamConfig,
    parse_bool,
    resolve_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "KEY_INCLUDE_SOURCE_LOCATION",
    "StreamConfig",
    "parse_bool",
    "resolve_config",
]
