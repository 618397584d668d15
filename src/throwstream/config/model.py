# topmark:header:start
#
#   project      : ThrowStream
#   file         : model.py
#   file_relpath : src/throwstream/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream configuration model.

`StreamConfig` is an immutable snapshot of the options that shape how a
`ThrowStream` renders its provenance records. It is threaded through every
accumulator at construction time rather than read from mutable global state,
so output is deterministic per instance.

Layers (lowest to highest precedence):
    1. Runtime defaults defined in code (`StreamConfig.from_defaults`).
    2. A TOML file (`throwstream.toml`, or `[tool.throwstream]` in ``pyproject.toml``).
    3. The ``THROWSTREAM_EXCEPTIONSOURCE`` environment variable.

`DEFAULT_CONFIG` is resolved once, at import time, from layers 1 and 3. It
plays the role of a build-time switch: it is fixed for the life of the process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Final

from throwstream.config.io import extract_settings_table, load_toml_dict, to_toml
from throwstream.config.logging import get_logger
from throwstream.constants import ENV_EXCEPTION_SOURCE

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from throwstream.config.logging import ThrowstreamLogger

logger: ThrowstreamLogger = get_logger(__name__)

KEY_INCLUDE_SOURCE_LOCATION: Final[str] = "include_source_location"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def parse_bool(value: str) -> bool | None:
    """Parse a boolean flag as written in the environment.

    Args:
        value: Raw text such as ``"on"``, ``"0"`` or ``"False"``.

    Returns:
        The parsed boolean, or None if the text is not a recognised flag.
    """
    v = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return None


@dataclass(frozen=True)
class StreamConfig:
    """Immutable ThrowStream settings.

    Attributes:
        include_source_location (bool): When True, each provenance record names the
            file, line and function of its call site. When False, a record is only
            the newline separator.
    """

    include_source_location: bool = True

    @classmethod
    def from_defaults(cls) -> StreamConfig:
        """Return the runtime defaults."""
        return cls()

    def with_env(self, environ: Mapping[str, str] | None = None) -> StreamConfig:
        """Return a copy with the environment layer applied.

        Args:
            environ: Environment mapping to consult (defaults to ``os.environ``).

        Returns:
            The updated config; unchanged if the variable is unset or unrecognised.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        raw: str | None = env.get(ENV_EXCEPTION_SOURCE)
        if raw is None or not raw.strip():
            return self
        flag: bool | None = parse_bool(raw)
        if flag is None:
            logger.warning(
                "Ignoring %s=%r (expected one of: %s)",
                ENV_EXCEPTION_SOURCE,
                raw,
                ", ".join(sorted(_TRUE_VALUES | _FALSE_VALUES)),
            )
            return self
        logger.debug("%s=%r -> include_source_location=%s", ENV_EXCEPTION_SOURCE, raw, flag)
        return replace(self, include_source_location=flag)

    def with_toml_dict(self, table: Mapping[str, Any]) -> StreamConfig:
        """Return a copy with the settings from a TOML table applied.

        Unknown keys and values of the wrong type are logged and ignored.

        Args:
            table: The ThrowStream settings table.

        Returns:
            The updated config.
        """
        result: StreamConfig = self
        for key, value in table.items():
            if key != KEY_INCLUDE_SOURCE_LOCATION:
                logger.warning("Ignoring unknown ThrowStream config key %r", key)
                continue
            if not isinstance(value, bool):
                logger.warning("Ignoring %s=%r (expected a boolean)", key, value)
                continue
            result = replace(result, include_source_location=value)
        return result

    def with_file(self, path: Path) -> StreamConfig:
        """Return a copy with the settings from a TOML file applied.

        Args:
            path: ``throwstream.toml`` or ``pyproject.toml``.

        Returns:
            The updated config (unchanged if the file cannot be read).
        """
        logger.debug("Loading ThrowStream config from %s", path)
        return self.with_toml_dict(extract_settings_table(path, load_toml_dict(path)))

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML-table-compatible mapping of this config."""
        return {KEY_INCLUDE_SOURCE_LOCATION: self.include_source_location}

    def to_toml(self, *, for_pyproject: bool = False) -> str:
        """Render this config as TOML text.

        Args:
            for_pyproject: If True, nest the output under ``[tool.throwstream]``.

        Returns:
            TOML document text.
        """
        return to_toml(self.to_dict(), for_pyproject=for_pyproject)


def resolve_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> StreamConfig:
    """Resolve the effective configuration from all layers.

    Args:
        path: Optional TOML file to layer over the defaults.
        environ: Environment mapping to consult (defaults to ``os.environ``).

    Returns:
        The effective `StreamConfig`.
    """
    config: StreamConfig = StreamConfig.from_defaults()
    if path is not None:
        config = config.with_file(path)
    return config.with_env(environ)


DEFAULT_CONFIG: Final[StreamConfig] = resolve_config()
