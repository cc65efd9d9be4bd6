# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for JsonShape.

Modules:

- ``logging``: TRACE level, colored console formatter, ``get_logger``.
- ``keys``: TOML section and key names.
- ``io``: TOML loading (``tomlkit``) and value getters.
- ``model``: the immutable `Config` and its `MutableConfig` builder.

Import the submodules directly; this package does not re-export them so that
``jsonshape.config.logging`` stays importable from every layer.
"""

from __future__ import annotations
