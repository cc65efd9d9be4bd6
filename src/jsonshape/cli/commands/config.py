# topmark:header:start
#
#   project      : JsonShape
#   file         : config.py
#   file_relpath : src/jsonshape/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonShape `config` command group.

Subcommands:
    - ``dump``: print the effective configuration as TOML.
    - ``defaults``: print the runtime defaults as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonshape.cli.config_resolver import resolve_config_from_click
from jsonshape.cli.console import get_console
from jsonshape.cli.options import common_config_options
from jsonshape.config.io import load_defaults_dict, nest_toml_under_section, to_toml
from jsonshape.constants import PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from jsonshape.config.model import Config


@click.group(name="config", help="Inspect JsonShape configuration.")
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(name="dump", help="Print the effective configuration as TOML.")
@common_config_options
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help=f"Nest the output under [{PYPROJECT_TOOL_SECTION}].",
)
def config_dump_command(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    for_pyproject: bool,
) -> None:
    """Print the merged configuration."""
    ctx = click.get_current_context()
    config: Config = resolve_config_from_click(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
    )
    text: str = to_toml(config.to_toml_dict())
    if for_pyproject:
        text = nest_toml_under_section(text, PYPROJECT_TOOL_SECTION)
    get_console(ctx).print(text, nl=False)


@config_command.command(name="defaults", help="Print the runtime defaults as TOML.")
def config_defaults_command() -> None:
    """Print the built-in defaults."""
    get_console(click.get_current_context()).print(to_toml(load_defaults_dict()), nl=False)
