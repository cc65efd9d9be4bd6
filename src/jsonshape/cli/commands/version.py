# topmark:header:start
#
#   project      : JsonShape
#   file         : version.py
#   file_relpath : src/jsonshape/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonShape `version` command.

Prints the JsonShape version installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from jsonshape.cli.console import get_console
from jsonshape.constants import JSONSHAPE, JSONSHAPE_VERSION


@click.command(
    name="version",
    help="Show the current version of JsonShape.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of JsonShape."""
    console = get_console(click.get_current_context())

    if output_format == "json":
        console.print(json.dumps({"tool": JSONSHAPE, "version": JSONSHAPE_VERSION}))
    else:
        console.print(console.styled(JSONSHAPE_VERSION, bold=True))
