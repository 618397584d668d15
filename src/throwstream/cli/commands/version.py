# topmark:header:start
#
#   project      : ThrowStream
#   file         : version.py
#   file_relpath : src/throwstream/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream `version` command.

Prints the current ThrowStream version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from throwstream.constants import THROWSTREAM_VERSION

if TYPE_CHECKING:
    from throwstream.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ThrowStream.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of ThrowStream.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    if output_format == "json":
        console.print(json.dumps({"version": THROWSTREAM_VERSION}))
    elif vlevel <= logging.INFO:
        console.print(console.styled("ThrowStream version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(THROWSTREAM_VERSION, bold=True)}")
    else:
        console.print(console.styled(THROWSTREAM_VERSION, bold=True))
