# topmark:header:start
#
#   project      : JsonShape
#   file         : main.py
#   file_relpath : src/jsonshape/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonShape CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from jsonshape.cli.commands.config import config_command
from jsonshape.cli.commands.render import render_command
from jsonshape.cli.commands.version import version_command
from jsonshape.cli.console import ClickConsole
from jsonshape.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from jsonshape.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize logging, color and the console on the Click context.

    ``-v``/``-q`` select the log level; without them ``JSONSHAPE_LOG_LEVEL``
    is consulted.
    """
    ctx.ensure_object(dict)

    if verbose or quiet:
        level: int | None = resolve_verbosity(verbose, quiet)
    else:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="JsonShape: render object graphs into JSON from declarative shapes.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the JsonShape CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'jsonshape render SOURCE --shape MODULE:ATTR'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
