# topmark:header:start
#
#   project      : ThrowStream
#   file         : io.py
#   file_relpath : src/throwstream/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading ThrowStream configuration from
on-disk TOML files (`throwstream.toml` / `pyproject.toml`) and for rendering
a configuration table back to TOML text.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from throwstream.config.logging import get_logger
from throwstream.constants import PYPROJECT_SECTION, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from throwstream.config.logging import ThrowstreamLogger

TomlTable = dict[str, Any]

logger: ThrowstreamLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``throwstream.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_settings_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the ThrowStream settings table of a parsed TOML document.

    ``pyproject.toml`` keeps the settings under ``[tool.throwstream]``; any other
    file is treated as a dedicated ThrowStream config with top-level keys.

    Args:
        path: The file the document was read from (used to detect ``pyproject.toml``).
        data: The parsed TOML document.

    Returns:
        The settings table, or an empty dict if the section is absent.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data

    table: Any = data
    for key in PYPROJECT_SECTION:
        if not isinstance(table, Mapping):
            return {}
        table = cast("Mapping[str, Any]", table).get(key, {})
    if not isinstance(table, Mapping):
        logger.warning("Ignoring non-table [%s] in %s", ".".join(PYPROJECT_SECTION), path)
        return {}
    return dict(cast("Mapping[str, Any]", table))


def to_toml(table: Mapping[str, Any], *, for_pyproject: bool = False) -> str:
    """Render a settings table as TOML text.

    Args:
        table: The settings to render.
        for_pyproject: If True, nest the output under ``[tool.throwstream]``.

    Returns:
        TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if for_pyproject:
        section = tomlkit.table(is_super_table=True)
        inner = tomlkit.table()
        for key, value in table.items():
            inner.add(key, value)
        section.add(PYPROJECT_SECTION[1], inner)
        doc.add(PYPROJECT_SECTION[0], section)
    else:
        for key, value in table.items():
            doc.add(key, value)
    return tomlkit.dumps(doc)
