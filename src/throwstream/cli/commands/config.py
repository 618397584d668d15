# topmark:header:start
#
#   project      : ThrowStream
#   file         : config.py
#   file_relpath : src/throwstream/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream `config` command.

Prints the effective configuration (defaults, optional TOML file, environment)
as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from throwstream.cli.options import common_config_options, load_cli_config

if TYPE_CHECKING:
    from pathlib import Path

    from throwstream.cli.console import ConsoleLike


@click.command(
    name="config",
    help="Show the effective ThrowStream configuration as TOML.",
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.throwstream] for pasting into pyproject.toml.",
)
@common_config_options
def config_command(*, for_pyproject: bool, config_path: Path | None) -> None:
    """Show the effective configuration.

    Args:
        for_pyproject (bool): Render for ``pyproject.toml``.
        config_path (Path | None): Optional TOML config file to layer over the defaults.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(load_cli_config(config_path).to_toml(for_pyproject=for_pyproject), nl=False)
