# topmark:header:start
#
#   project      : JsonShape
#   file         : options.py
#   file_relpath : src/jsonshape/engine/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node name classification and call option parsing.

A node name ending in ``!`` declares an object-shaped node (nested object, or
array in array mode); ``?`` additionally makes it nullable. Any other name is a
scalar attribute.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from jsonshape.config.logging import get_logger
from jsonshape.constants import NULLABLE_SUFFIX, OBJECT_SUFFIX
from jsonshape.core.types import MISSING

if TYPE_CHECKING:
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.core.types import Predicate

logger: JsonShapeLogger = get_logger(__name__)

# Option keys accepted in an options mapping; "if_" is the keyword-safe alias.
OPT_IF: Final[str] = "if"
OPT_IF_ALIAS: Final[str] = "if_"
OPT_UNLESS: Final[str] = "unless"
OPT_INHERIT: Final[str] = "inherit"
OPT_OBJ: Final[str] = "obj"


class NodeShape(Enum):
    """Shape of a node as declared by its name suffix."""

    ATTRIBUTE = "attribute"
    OBJECT = "object"
    NULLABLE_OBJECT = "nullable_object"

    @property
    def is_object(self) -> bool:
        """Whether the node renders a mapping (or array of mappings)."""
        return self is not NodeShape.ATTRIBUTE

    @property
    def nullable(self) -> bool:
        """Whether an absent object renders as ``null``."""
        return self is NodeShape.NULLABLE_OBJECT


def parse_node_name(name: str) -> tuple[str, NodeShape]:
    """Split a node name into its output key and declared shape.

    Args:
        name (str): Name as written in the description, e.g. ``"owner?"``.

    Returns:
        tuple[str, NodeShape]: The output key and the node shape.

    Raises:
        ValueError: If the key is empty.
    """
    shape = NodeShape.ATTRIBUTE
    key: str = name
    if name.endswith(NULLABLE_SUFFIX):
        shape, key = NodeShape.NULLABLE_OBJECT, name[:-1]
    elif name.endswith(OBJECT_SUFFIX):
        shape, key = NodeShape.OBJECT, name[:-1]
    if not key:
        raise ValueError(f"Invalid node name {name!r}: key must be non-empty")
    return key, shape


@dataclass(frozen=True, slots=True)
class NodeOptions:
    """Options for a single node call.

    Attributes:
        obj (Any): Explicit object override, or ``MISSING`` when not supplied.
        if_ (Predicate | None): Node is emitted only when this returns truthy.
        unless (Predicate | None): Node is skipped when this returns truthy.
        inherit (bool): Use the scope's current object itself as the node object.
        nullable (bool): Render ``null`` instead of an empty container when the
            object is absent (object-shaped nodes only).
    """

    obj: Any = MISSING
    if_: Predicate | None = None
    unless: Predicate | None = None
    inherit: bool = False
    nullable: bool = False

    @property
    def has_override(self) -> bool:
        """Whether an explicit object override was supplied."""
        return self.obj is not MISSING

    @classmethod
    def from_call(
        cls,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
        *,
        nullable: bool = False,
    ) -> NodeOptions:
        """Build options from the positional and keyword arguments of a node call.

        A trailing ``Mapping`` positional is the options bag; a remaining
        leading positional is the explicit object override. Keyword options
        take precedence over the bag.

        Args:
            args (tuple[Any, ...]): Positional arguments after the node name.
            kwargs (Mapping[str, Any]): Keyword options.
            nullable (bool): Derived from the node name suffix.

        Returns:
            NodeOptions: The parsed options.

        Raises:
            TypeError: If more than one object override is supplied.
        """
        positional: list[Any] = list(args)
        bag: dict[str, Any] = {}
        if positional and isinstance(positional[-1], Mapping):
            bag.update(positional.pop())
        bag.update(kwargs)

        obj: Any = bag.pop(OPT_OBJ, MISSING)
        if obj is not MISSING:
            positional.insert(0, obj)
        if len(positional) > 1:
            raise TypeError(
                f"node accepts at most one object argument, got {len(positional)}"
            )
        obj = positional[0] if positional else MISSING

        if_: Predicate | None = bag.pop(OPT_IF, None)
        alias: Predicate | None = bag.pop(OPT_IF_ALIAS, None)
        if alias is not None:
            if_ = alias
        unless: Predicate | None = bag.pop(OPT_UNLESS, None)
        inherit: bool = bool(bag.pop(OPT_INHERIT, False))

        if bag:
            logger.debug("Ignoring unknown node options: %s", ", ".join(sorted(bag)))

        return cls(obj=obj, if_=if_, unless=unless, inherit=inherit, nullable=nullable)
