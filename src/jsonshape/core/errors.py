# topmark:header:start
#
#   project      : JsonShape
#   file         : errors.py
#   file_relpath : src/jsonshape/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the JsonShape render engine.

All errors are fatal to the render that raised them: there is no partial
result mode. Property lookups that find nothing are *not* errors; they resolve
to ``None``. Exceptions raised by user predicates, value callbacks and
fragments propagate unchanged and are never wrapped.
"""

from __future__ import annotations


class JsonShapeError(Exception):
    """Base class for all JsonShape engine errors."""


class UnexpectedNodeKindError(JsonShapeError):
    """An attribute-shaped node was declared while array mode was active.

    Array contents are always rendered objects, so only ``name!`` / ``name?``
    may follow [`Builder.many`][jsonshape.engine.builder.Builder.many].
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Unexpected attribute node `{name}` in array mode")
        self.name = name


class MissingFragmentError(JsonShapeError):
    """A construct that needs a child fragment was invoked without one."""


class NotIterableError(JsonShapeError, TypeError):
    """An array node resolved to a value that is not a sequence of elements."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f"Array node `{name}` resolved to a non-iterable {type(value).__name__} value"
        )
        self.name = name
        self.value = value
