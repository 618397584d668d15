# topmark:header:start
#
#   project      : ThrowStream
#   file         : demo.py
#   file_relpath : src/throwstream/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThrowStream `demo` command.

Reads two integers and prints ``(1/a)*(1/b)``. Any failure is reported by
printing the rendered backtrace of the `ThrowStream` that reached the top.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from throwstream.cli.exit_codes import ExitCode
from throwstream.cli.options import common_config_options, load_cli_config
from throwstream.demo import run_demo
from throwstream.stream import ThrowStream

if TYPE_CHECKING:
    from pathlib import Path

    from throwstream.cli.console import ConsoleLike
    from throwstream.config.model import StreamConfig


@click.command(
    name="demo",
    help="Compute (1/a)*(1/b) and show the backtrace of any failure.",
)
@click.option("--a", "text_a", default=None, help="Integer a (prompted for when omitted).")
@click.option("--b", "text_b", default=None, help="Integer b (prompted for when omitted).")
@click.option(
    "--no-source",
    is_flag=True,
    default=False,
    help="Omit file, line and function from provenance records.",
)
@common_config_options
def demo_command(
    *,
    text_a: str | None,
    text_b: str | None,
    no_source: bool,
    config_path: Path | None,
) -> None:
    """Run the reciprocal-product demo.

    Args:
        text_a (str | None): Raw text for ``a``; prompted for if None.
        text_b (str | None): Raw text for ``b``; prompted for if None.
        no_source (bool): Render message-only backtraces.
        config_path (Path | None): Optional TOML config file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    config: StreamConfig = load_cli_config(config_path, no_source=no_source)

    if text_a is None or text_b is None:
        if vlevel < logging.ERROR:
            console.print("Enter two integers and I will calculate (1/a)*(1/b)")
        if text_a is None:
            text_a = click.prompt("Enter an integer (a)", default="", show_default=False)
        if text_b is None:
            text_b = click.prompt("Enter an integer (b)", default="", show_default=False)

    try:
        result: float = run_demo(text_a, text_b, config=config)
    except ThrowStream as ex:
        console.error(f"Exception! what() = {ex.what()}")
        ctx.exit(ExitCode.FAILURE)

    console.print(f"(1/a)*(1/b) = {result}")
