# topmark:header:start
#
#   project      : ThrowStream
#   file         : __init__.py
#   file_relpath : src/throwstream/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream package.

ThrowStream builds a human-readable, ordered call-site backtrace inside an
exception as it propagates up a call chain. Every site that raises, re-raises
or annotates the error appends a provenance record and free text; the
accumulated text is the error's diagnostic payload.
"""

from __future__ import annotations

from throwstream.api import (
    absorb_here,
    append_copy_here,
    append_here,
    stream_here,
    traced,
)
from throwstream.chain import (
    ChainCarrier,
    ChainSource,
    ForeignMessage,
    NativeChain,
    chain_source_of,
    describe_exception,
)
from throwstream.config import DEFAULT_CONFIG, StreamConfig, resolve_config
from throwstream.location import SourceLocation, format_record
from throwstream.stream import ThrowStream

__all__ = [
    "DEFAULT_CONFIG",
    "ChainCarrier",
    "ChainSource",
    "ForeignMessage",
    "NativeChain",
    "SourceLocation",
    "StreamConfig",
    "ThrowStream",
    "absorb_here",
    "append_copy_here",
    "append_here",
    "chain_source_of",
    "describe_exception",
    "format_record",
    "resolve_config",
    "stream_here",
    "traced",
]
