# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The node-building engine.

Modules:

- ``options``: node name classification and per-call option parsing.
- ``resolve``: object resolution, the ``if``/``unless`` gate and array source
  materialization.
- ``deferred``: the per-scope registry that merges several fragments into the
  same array elements.
- ``builder``: the scope object fragments talk to.
- ``renderer``: the render entry point.
"""

from __future__ import annotations
