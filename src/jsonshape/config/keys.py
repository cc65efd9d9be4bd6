# topmark:header:start
#
#   project      : JsonShape
#   file         : keys.py
#   file_relpath : src/jsonshape/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for JsonShape configuration.

These constants are the external configuration schema as it appears in
``jsonshape.toml`` and in ``[tool.jsonshape]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by JsonShape configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_INDENT: Final[str] = "indent"
    KEY_ENSURE_ASCII: Final[str] = "ensure_ascii"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_DATETIME_FORMAT: Final[str] = "datetime_format"
    KEY_ENUM_STYLE: Final[str] = "enum_style"


class CliKey:
    """Keys of the argument mapping accepted by `MutableConfig.apply_cli_args`."""

    INDENT: Final[str] = "indent"
    ENSURE_ASCII: Final[str] = "ensure_ascii"
    DATETIME_FORMAT: Final[str] = "datetime_format"
    ENUM_STYLE: Final[str] = "enum_style"


ENUM_STYLES: Final[tuple[str, ...]] = ("name", "value")
