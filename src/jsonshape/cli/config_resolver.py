# topmark:header:start
#
#   project      : JsonShape
#   file         : config_resolver.py
#   file_relpath : src/jsonshape/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective configuration for a CLI command.

Layers defaults, discovered config files, ``--config`` files and command line
overrides, then reports config diagnostics on the console.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from jsonshape.cli.console import get_console
from jsonshape.cli.errors import JsonShapeConfigError
from jsonshape.config.logging import get_logger
from jsonshape.config.model import MutableConfig
from jsonshape.core.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    import click

    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.config.model import Config

logger: JsonShapeLogger = get_logger(__name__)


def resolve_config_from_click(
    ctx: click.Context,
    *,
    config_paths: Iterable[str] = (),
    no_config: bool = False,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Build the frozen `Config` for the current command.

    Warnings are printed to stderr; errors (e.g. unreadable config files)
    abort the command.

    Raises:
        JsonShapeConfigError: If any layer reported an error.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        discover=not no_config,
    )
    if overrides:
        draft.apply_cli_args(overrides)
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)

    console = get_console(ctx)
    color: bool = bool(ctx.obj.get("color_enabled", False))
    errors: list[str] = []
    for diag in config.diagnostics:
        if diag.level is DiagnosticLevel.ERROR:
            errors.append(diag.message)
        else:
            console.warn(diag.render(color=color))
    if errors:
        raise JsonShapeConfigError("; ".join(errors))
    return config
