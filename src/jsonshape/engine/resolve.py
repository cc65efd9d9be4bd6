# topmark:header:start
#
#   project      : JsonShape
#   file         : resolve.py
#   file_relpath : src/jsonshape/engine/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Object resolution, conditional gate and array source materialization."""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from jsonshape.config.logging import get_logger
from jsonshape.core.errors import NotIterableError

if TYPE_CHECKING:
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.engine.options import NodeOptions

logger: JsonShapeLogger = get_logger(__name__)


def lookup_property(obj: Any, name: str) -> Any:
    """Read property ``name`` from ``obj``; ``None`` when it does not exist.

    Mappings are looked up by key, any other object by public attribute.
    Attribute names starting with an underscore are never resolved, and
    methods are not called: a name that resolves to a bound method is absent.

    Args:
        obj (Any): The source object.
        name (str): Property name.

    Returns:
        Any: The property value, or None.
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        mapping: Mapping[Any, Any] = obj
        return mapping.get(name)
    if name.startswith("_"):
        return None
    value: Any = getattr(obj, name, None)
    if inspect.ismethod(value):
        logger.debug("Property '%s' of %s is a method; not called", name, type(obj).__qualname__)
        return None
    return value


def resolve_object_for(current: Any, name: str, options: NodeOptions) -> Any:
    """Resolve the object a node renders from.

    Priority: explicit override, then ``inherit`` (the current object itself),
    then the property ``name`` of the current object.
    """
    if options.has_override:
        return options.obj
    if options.inherit:
        return current
    return lookup_property(current, name)


def gate_subject(current: Any, options: NodeOptions) -> Any:
    """Return the object predicates and value callbacks are called with."""
    return options.obj if options.has_override else current


def passes_gate(current: Any, options: NodeOptions) -> bool:
    """Evaluate the ``if`` / ``unless`` predicates of a node.

    Predicate exceptions propagate unchanged.
    """
    if options.if_ is None and options.unless is None:
        return True
    subject: Any = gate_subject(current, options)
    if options.if_ is not None and not options.if_(subject):
        return False
    if options.unless is not None and options.unless(subject):
        return False
    return True


def is_absent(obj: Any) -> bool:
    """Whether a resolved object counts as absent for nullable nodes."""
    return obj is None or obj is False


def materialize_sequence(name: str, obj: Any) -> tuple[Any, ...]:
    """Consume ``obj`` into a tuple of array elements.

    Any finite iterable is consumed exactly once. Text, bytes and mappings are
    rejected: they are values, not collections of renderable elements.

    Raises:
        NotIterableError: If ``obj`` cannot serve as an array source.
    """
    if isinstance(obj, (str, bytes, bytearray, Mapping)) or not isinstance(obj, Iterable):
        raise NotIterableError(name, obj)
    return tuple(obj)
