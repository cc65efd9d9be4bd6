# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine output: turning render results into JSON text and response payloads.

- [`jsonshape.machine.serializers`][jsonshape.machine.serializers]: JSON text.
- [`jsonshape.machine.response`][jsonshape.machine.response]: framework-agnostic
  JSON response payloads for web integrations.
"""

from __future__ import annotations

from jsonshape.machine.response import JsonResponse, render_response
from jsonshape.machine.serializers import render_json, serialize_json_object

__all__ = [
    "JsonResponse",
    "render_json",
    "render_response",
    "serialize_json_object",
]
