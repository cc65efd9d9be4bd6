# topmark:header:start
#
#   project      : JsonShape
#   file         : formatter.py
#   file_relpath : src/jsonshape/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value normalization applied to attribute nodes.

Every attribute value passes through a formatter before it is written into the
output tree. A formatter is any callable ``(value, name) -> JSONValue``; the
attribute name is passed so a formatter can special-case individual keys.

Conversions performed by [`JsonFormatter`][jsonshape.core.formatter.JsonFormatter]:
  - `datetime` / `date` / `time` -> ISO 8601 text (or ``strftime`` text)
  - `Decimal`, `UUID`, `Path` -> `str`
  - `Enum` -> `Enum.name` (or `Enum.value`)
  - object with callable `.to_dict()` -> normalize(`.to_dict()`)
  - `Mapping` -> `dict[str, normalized value]`
  - `list/tuple/set/frozenset` -> `list[normalized item]`
  - anything else is returned unchanged
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Literal, Protocol, cast
from uuid import UUID

if TYPE_CHECKING:
    from jsonshape.core.types import JSONValue

EnumStyle = Literal["name", "value"]


class Formatter(Protocol):
    """Callable that converts a raw attribute value into a JSON-safe value."""

    def __call__(self, value: Any, name: str) -> JSONValue:
        """Return the JSON-safe form of ``value`` for attribute ``name``."""
        ...


def identity_formatter(value: Any, name: str) -> Any:
    """Return ``value`` unchanged."""
    return value


@dataclass(frozen=True, slots=True)
class JsonFormatter:
    """Default formatter: temporal types to text, containers normalized recursively.

    Attributes:
        datetime_format (str | None): ``strftime`` pattern for temporal values;
            ISO 8601 when None.
        enum_style (EnumStyle): Render enums by ``"name"`` or by ``"value"``.
    """

    datetime_format: str | None = None
    enum_style: EnumStyle = "name"

    def __call__(self, value: Any, name: str) -> JSONValue:
        return cast("JSONValue", self.normalize(value))

    def normalize(self, obj: object) -> object:
        """Normalize ``obj`` into JSON-serializable structures.

        Args:
            obj: The value to normalize.

        Returns:
            A JSON-serializable representation of `obj`.
        """
        # Before the scalar check: IntEnum / StrEnum members are also int / str
        if isinstance(obj, Enum):
            return self.normalize(obj.value) if self.enum_style == "value" else obj.name

        if obj is None or isinstance(obj, (bool, int, float, str)):
            return obj

        if isinstance(obj, (datetime, date, time)):
            if self.datetime_format is not None:
                return obj.strftime(self.datetime_format)
            return obj.isoformat()

        if isinstance(obj, (Decimal, UUID, PurePath)):
            return str(obj)

        to_dict: Any | None = getattr(obj, "to_dict", None)
        if callable(to_dict):
            return self.normalize(to_dict())

        if isinstance(obj, Mapping):
            mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
            return {str(k): self.normalize(v) for k, v in mapping.items()}

        if isinstance(obj, (list, tuple, set, frozenset)):
            return [self.normalize(v) for v in cast("list[object]", obj)]

        return obj


def normalize_payload(obj: object) -> object:
    """Normalize a payload with a default `JsonFormatter`."""
    return _DEFAULT.normalize(obj)


_DEFAULT = JsonFormatter()
