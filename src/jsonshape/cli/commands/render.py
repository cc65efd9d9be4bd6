# topmark:header:start
#
#   project      : JsonShape
#   file         : render.py
#   file_relpath : src/jsonshape/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonShape `render` command.

Loads a source document, renders it through a shape callable and prints the
resulting JSON.

Examples:
    ```bash
    jsonshape render users.json --shape myapp.shapes:user_list
    cat users.json | jsonshape render - --shape myapp.shapes:user_list --indent -1
    ```
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import click

from jsonshape.cli.config_resolver import resolve_config_from_click
from jsonshape.cli.console import get_console
from jsonshape.cli.errors import JsonShapeRenderError
from jsonshape.cli.loaders import import_fragment, load_source
from jsonshape.cli.options import common_config_options, common_output_options
from jsonshape.config.keys import CliKey
from jsonshape.config.logging import get_logger
from jsonshape.core.errors import JsonShapeError
from jsonshape.machine.serializers import render_json

if TYPE_CHECKING:
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.config.model import Config
    from jsonshape.core.types import Fragment

logger: JsonShapeLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render SOURCE (JSON, TOML, or '-' for JSON on STDIN) through a shape.",
)
@click.argument("source", metavar="SOURCE")
@click.option(
    "--shape",
    "shape_ref",
    metavar="MODULE:ATTR",
    default=None,
    help="Shape callable to render with. Without it only exported attributes are rendered.",
)
@common_config_options
@common_output_options
def render_command(
    *,
    source: str,
    shape_ref: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    indent: int | None,
    ensure_ascii: bool | None,
    datetime_format: str | None,
    enum_style: str | None,
) -> None:
    """Render a source document and print the JSON result."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    config: Config = resolve_config_from_click(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            CliKey.INDENT: indent,
            CliKey.ENSURE_ASCII: ensure_ascii,
            CliKey.DATETIME_FORMAT: datetime_format,
            CliKey.ENUM_STYLE: enum_style,
        },
    )

    fragment: Fragment | None = import_fragment(shape_ref) if shape_ref else None
    data: Any = load_source(source, stdin=sys.stdin)

    try:
        text: str = render_json(data, fragment, config=config)
    except JsonShapeError as exc:
        logger.debug("Render failed: %r", exc)
        raise JsonShapeRenderError(str(exc)) from exc

    console.print(text)
