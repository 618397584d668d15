# topmark:header:start
#
#   project      : ThrowStream
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest and pyright.
  - `lint`: Ruff lint on the repository.
  - `format_check`: Verify formatting with Ruff.

Common invocations:
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s lint`
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any, cast

import nox
import tomlkit

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    doc: dict[str, Any] = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
    project: dict[str, Any] = cast("dict[str, Any]", doc.get("project", {}))
    classifiers: list[str] = cast("list[str]", project.get("classifiers", []))

    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in classifiers:
        v: str = c.removeprefix(prefix).strip() if c.startswith(prefix) else ""
        parts: list[str] = v.split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(v)

    if not versions:
        warnings.warn(
            f"No Python versions found in classifiers. Falling back to {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda s: tuple(int(p) for p in s.split(".")))


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite and the type checker."""
    session.install("-e", ".[test]", "pyright")
    session.run("pytest", "-q", "tests", *session.posargs)
    session.run("pyright", "--pythonversion", session.python or CURRENT_PYTHON_VERSION)


@nox.session
def lint(session: nox.Session) -> None:
    """Lint with Ruff."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting with Ruff."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")
