# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonShape CLI commands."""

from __future__ import annotations
