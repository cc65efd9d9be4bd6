# topmark:header:start
#
#   project      : JsonShape
#   file         : types.py
#   file_relpath : src/jsonshape/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type aliases and sentinels for the render engine.

Callback signatures are fixed per node kind:

- ``Fragment``: called with the [`Builder`][jsonshape.engine.builder.Builder]
  of the scope it renders into; its return value is ignored.
- ``ValueFn``: attribute value callback, called with the explicit object
  override or the current source object.
- ``Predicate``: ``if`` / ``unless`` gate, called with the explicit object
  override or the current source object; only truthiness matters.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Literal, Union

if TYPE_CHECKING:
    from jsonshape.engine.builder import Builder

JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, list["JSONValue"], dict[str, "JSONValue"]]
JSONObject = dict[str, Any]

Fragment = Callable[["Builder"], object]
ValueFn = Callable[[Any], object]
Predicate = Callable[[Any], object]


class _Missing(Enum):
    """Marker for "argument not supplied" where ``None`` is a valid value."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> Literal[False]:
        return False


MISSING: Final = _Missing.MISSING


def noop_fragment(_builder: Builder) -> None:
    """Fragment that emits nothing."""
