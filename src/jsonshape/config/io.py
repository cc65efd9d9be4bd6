# topmark:header:start
#
#   project      : JsonShape
#   file         : io.py
#   file_relpath : src/jsonshape/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for JsonShape configuration.

Parsing and rendering are done with `tomlkit`; loaded documents are returned
as plain ``dict`` structures. Getters never raise on bad input: they log and
return ``None`` so the caller can record a diagnostic and keep the default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsonshape.config.keys import Toml
from jsonshape.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from jsonshape.config.logging import JsonShapeLogger

TomlTable = dict[str, Any]

logger: JsonShapeLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return JsonShape's runtime defaults as a TOML-table-compatible dict.

    Notes:
        The returned value is a new dict so callers can mutate it safely.
        ``datetime_format`` is absent by default (ISO 8601 output).
    """
    return {
        Toml.SECTION_OUTPUT: {
            Toml.KEY_INDENT: 2,
            Toml.KEY_ENSURE_ASCII: False,
        },
        Toml.SECTION_FORMAT: {
            Toml.KEY_ENUM_STYLE: "name",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``jsonshape.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content; an empty dict on failure (the error is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(toml_dict: TomlTable) -> str:
    """Render a TOML-table-compatible dict as TOML text."""
    return tomlkit.dumps(toml_dict)


def nest_toml_under_section(toml_text: str, section: str) -> str:
    """Wrap a TOML document under a dotted section path (e.g. ``tool.jsonshape``).

    Raises:
        ValueError: If ``section`` has no usable segments.
    """
    parts: list[str] = [p for p in section.split(".") if p]
    if not parts:
        raise ValueError("section path must contain at least one name")
    body: TomlTable = tomlkit.parse(toml_text).unwrap()
    nested: TomlTable = body
    for part in reversed(parts):
        nested = {part: nested}
    return tomlkit.dumps(nested)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` or an empty dict when missing or malformed."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r", key, value)
    return {}


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer; booleans are not accepted as integers."""
    value: Any = table.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is not None:
        logger.debug("Cannot coerce %r to int, returning None", value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean, coercing integers via ``bool(value)``."""
    value: Any = table.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if value is not None:
        logger.debug("Cannot coerce %r to bool, returning None", value)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string; other values yield None."""
    value: Any = table.get(key)
    if isinstance(value, str):
        return value
    if value is not None:
        logger.debug("Cannot coerce %r to string, returning None", value)
    return None
