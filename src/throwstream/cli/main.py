# topmark:header:start
#
#   project      : ThrowStream
#   file         : main.py
#   file_relpath : src/throwstream/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream Click CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from throwstream.cli.commands.config import config_command
from throwstream.cli.commands.demo import demo_command
from throwstream.cli.commands.version import version_command
from throwstream.cli.console import ClickConsole, ConsoleLike
from throwstream.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_color,
    resolve_verbosity,
)
from throwstream.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)
    logger.debug("Program-output verbosity level: %s", ctx.obj["verbosity_level"])

    # Internal logging is configured via env
    setup_logging(level=resolve_env_log_level())

    enable_color = resolve_color(no_color=no_color)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ThrowStream CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the ThrowStream CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'throwstream demo' to see a backtrace being built.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
