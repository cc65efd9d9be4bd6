# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonShape package.

JsonShape turns a domain object graph into a JSON-compatible tree from a
declarative description. A description is a plain callable that receives a
[`Builder`][jsonshape.engine.builder.Builder] and declares attributes, nested
objects and arrays; the engine walks the source objects in lockstep.

Example:
    ```python
    import jsonshape

    def shape(b: jsonshape.Builder) -> None:
        b.attr("name")
        b.array("tags", lambda t: t.attr("upper", lambda tag: tag.upper()))

    jsonshape.render({"name": "Ada", "tags": ["x", "y"]}, shape)
    # {"name": "Ada", "tags": [{"upper": "X"}, {"upper": "Y"}]}
    ```
"""

from __future__ import annotations

from jsonshape.core.errors import (
    JsonShapeError,
    MissingFragmentError,
    NotIterableError,
    UnexpectedNodeKindError,
)
from jsonshape.core.formatter import Formatter, JsonFormatter, identity_formatter
from jsonshape.core.types import MISSING, Fragment, JSONValue
from jsonshape.engine.builder import Builder
from jsonshape.engine.renderer import Renderer, render
from jsonshape.registry.exports import ExportRegistry, ExportSpec, MutableExportRegistry

__all__ = [
    "MISSING",
    "Builder",
    "ExportRegistry",
    "ExportSpec",
    "Formatter",
    "Fragment",
    "JSONValue",
    "JsonFormatter",
    "JsonShapeError",
    "MissingFragmentError",
    "MutableExportRegistry",
    "NotIterableError",
    "Renderer",
    "UnexpectedNodeKindError",
    "identity_formatter",
    "render",
]
