# topmark:header:start
#
#   project      : JsonShape
#   file         : errors.py
#   file_relpath : src/jsonshape/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JsonShape CLI.

Raise these in commands to exit with a standardized message and exit code.
They prefer the project console when one is present in the Click context and
fall back to Click's default error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from jsonshape.cli.exit_codes import ExitCode


class JsonShapeCliError(click.ClickException):
    """Base class for all JsonShape CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class JsonShapeUsageError(JsonShapeCliError):
    """Invalid invocation (e.g. an unimportable ``--shape``)."""

    exit_code = ExitCode.USAGE_ERROR


class JsonShapeDataError(JsonShapeCliError):
    """The source document could not be decoded."""

    exit_code = ExitCode.DATA_ERROR


class JsonShapeNoInputError(JsonShapeCliError):
    """The source document does not exist or cannot be read."""

    exit_code = ExitCode.NO_INPUT


class JsonShapeConfigError(JsonShapeCliError):
    """Configuration could not be loaded."""

    exit_code = ExitCode.CONFIG_ERROR


class JsonShapeRenderError(JsonShapeCliError):
    """The render engine rejected the description."""

    exit_code = ExitCode.FAILURE
