# topmark:header:start
#
#   project      : JsonShape
#   file         : options.py
#   file_relpath : src/jsonshape/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Reusable options (verbosity, color, config files, output settings) and their
resolution logic live here so commands and groups stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import ParamSpec, TypeVar

import click

from jsonshape.cli.errors import JsonShapeUsageError
from jsonshape.config.keys import ENUM_STYLES
from jsonshape.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v`` / ``-q`` counts.

    Three or more ``-v`` select TRACE, two DEBUG, one INFO; any ``-q``
    selects ERROR. The default is WARNING.

    Raises:
        JsonShapeUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise JsonShapeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (repeat for more detail).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color``, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and finally whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered config files (only use defaults and --config).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the ``[output]`` and ``[format]`` config sections."""
    f = click.option(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation width; a negative value prints compact JSON.",
    )(f)
    f = click.option(
        "--ensure-ascii/--no-ensure-ascii",
        "ensure_ascii",
        default=None,
        help="Escape non-ASCII characters in the JSON output.",
    )(f)
    f = click.option(
        "--datetime-format",
        "datetime_format",
        default=None,
        metavar="PATTERN",
        help="strftime pattern for dates and times (default: ISO 8601).",
    )(f)
    f = click.option(
        "--enum-style",
        "enum_style",
        type=click.Choice(ENUM_STYLES),
        default=None,
        help="Render enum members by name or by value.",
    )(f)
    return f
