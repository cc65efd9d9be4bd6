# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across JsonShape.

Included modules:

- ``types``
  Callable and value type aliases used by the engine (fragments, predicates,
  JSON values) and the ``MISSING`` sentinel.

- ``errors``
  The exception hierarchy raised by the render engine.

- ``formatter``
  The value-normalization hook applied to every attribute node.

This package has no dependency on the CLI or configuration layers.
"""

from __future__ import annotations
