# topmark:header:start
#
#   project      : JsonShape
#   file         : constants.py
#   file_relpath : src/jsonshape/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonShape Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

JSONSHAPE: Final[str] = "jsonshape"
JSONSHAPE_VERSION: str = get_version("jsonshape")

# Environment variable consulted by `jsonshape.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "JSONSHAPE_LOG_LEVEL"

# Config file names looked up during discovery
CONFIG_FILE_NAME: Final[str] = "jsonshape.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.jsonshape"

# Node name suffixes understood by the dispatcher
OBJECT_SUFFIX: Final[str] = "!"
NULLABLE_SUFFIX: Final[str] = "?"

JSON_CONTENT_TYPE: Final[str] = "application/json"
