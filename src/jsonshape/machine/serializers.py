# topmark:header:start
#
#   project      : JsonShape
#   file         : serializers.py
#   file_relpath : src/jsonshape/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure JSON serialization of render results.

Conventions:
- `json.dumps()` does not append a trailing newline; neither do these helpers.
- Trees are normalized before serialization, so values written by an identity
  formatter (dates, enums, paths) still serialize.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from jsonshape.core.formatter import normalize_payload
from jsonshape.engine.renderer import Renderer

if TYPE_CHECKING:
    from jsonshape.config.model import Config
    from jsonshape.core.types import Fragment


def serialize_json_object(
    obj: object,
    *,
    indent: int | None = 2,
    ensure_ascii: bool = False,
) -> str:
    """Serialize an object to JSON text (no trailing newline).

    Args:
        obj: The object to serialize.
        indent: Indentation width; None for compact single-line output.
        ensure_ascii: Escape non-ASCII characters.

    Returns:
        The JSON text.
    """
    normalized: object = normalize_payload(obj)
    return json.dumps(normalized, indent=indent, ensure_ascii=ensure_ascii)


def render_json(
    obj: Any,
    fragment: Fragment | None,
    *,
    renderer: Renderer | None = None,
    config: Config | None = None,
) -> str:
    """Render ``obj`` through ``fragment`` and serialize the result.

    Args:
        obj: Root source object.
        fragment: Description to render with.
        renderer: Renderer to use; built from ``config`` (or defaults) when None.
        config: Output and format settings.

    Returns:
        The JSON text.
    """
    tree = resolve_renderer(renderer, config).render(obj, None, fragment)
    return serialize_with_config(tree, config)


def resolve_renderer(renderer: Renderer | None, config: Config | None) -> Renderer:
    """Return ``renderer``, or one built from ``config`` (or defaults) when None."""
    if renderer is not None:
        return renderer
    return Renderer.from_config(config) if config is not None else Renderer()


def serialize_with_config(tree: object, config: Config | None) -> str:
    """Serialize ``tree`` using the output settings of ``config`` (or defaults)."""
    if config is None:
        return serialize_json_object(tree)
    return serialize_json_object(tree, indent=config.indent, ensure_ascii=config.ensure_ascii)
