# topmark:header:start
#
#   project      : JsonShape
#   file         : loaders.py
#   file_relpath : src/jsonshape/cli/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input loading for the CLI: source documents and shape callables.

Source documents are JSON (``.json`` or ``-`` for STDIN) or TOML (``.toml``,
parsed with ``tomlkit``). Shapes are imported from ``module:attribute``
references, e.g. ``myapp.shapes:user``.
"""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsonshape.cli.errors import JsonShapeDataError, JsonShapeNoInputError, JsonShapeUsageError
from jsonshape.config.logging import get_logger

if TYPE_CHECKING:
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.core.types import Fragment

logger: JsonShapeLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def load_source(source: str, *, stdin: IO[str] | None = None) -> Any:
    """Load the source document named by ``source``.

    Args:
        source: A file path, or ``-`` to read JSON from ``stdin``.
        stdin: Stream used for ``-``.

    Returns:
        The decoded document.

    Raises:
        JsonShapeNoInputError: If the file does not exist or cannot be read.
        JsonShapeDataError: If the document cannot be decoded.
    """
    if source == STDIN_SENTINEL:
        if stdin is None:
            raise JsonShapeNoInputError("No STDIN available to read the source document from.")
        return _decode_json(stdin.read(), "<stdin>")

    path = Path(source)
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise JsonShapeNoInputError(f"Source file not found: {source}") from exc
    except OSError as exc:
        raise JsonShapeNoInputError(f"Cannot read source file {source}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise JsonShapeDataError(f"Source file {source} is not valid UTF-8: {exc}") from exc

    logger.debug("Loaded source document %s (%d characters)", path, len(text))
    if path.suffix.lower() == ".toml":
        try:
            return tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise JsonShapeDataError(f"Invalid TOML in {source}: {exc}") from exc
    return _decode_json(text, source)


def _decode_json(text: str, label: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonShapeDataError(f"Invalid JSON in {label}: {exc}") from exc


def import_fragment(reference: str) -> Fragment:
    """Import the fragment callable named by ``module:attribute``.

    Dotted attribute paths (``module:Class.shape``) are supported.

    Raises:
        JsonShapeUsageError: If the reference is malformed, cannot be imported,
            or does not name a callable.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise JsonShapeUsageError(
            f"Invalid shape reference {reference!r}: expected 'module:attribute'."
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise JsonShapeUsageError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise JsonShapeUsageError(
                f"Module {module_name!r} has no attribute {attr_path!r}."
            ) from exc

    if not callable(target):
        raise JsonShapeUsageError(f"Shape {reference!r} is not callable.")
    logger.debug("Imported shape %s", reference)
    return target
