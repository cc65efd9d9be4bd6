# topmark:header:start
#
#   project      : JsonShape
#   file         : builder.py
#   file_relpath : src/jsonshape/engine/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The builder: one render scope and the operations fragments call on it.

A `Builder` exists per output mapping level. It holds the current source
object, the output mapping it writes into, the one-shot array-mode flag and
the deferred array registry. Fragments receive the builder and declare nodes:

    ```python
    def user_shape(b: Builder) -> None:
        b.attr("name")
        b.attr("initials", lambda u: u.name[:1])
        b.object("address", lambda a: a.attr("city"), nullable=True)
        b.array("roles", lambda r: r.attr("label"))
    ```

or, using node names with a shape suffix:

    ```python
    def user_shape(b: Builder) -> None:
        b.node("name")
        b.node("address?", fragment=lambda a: a.node("city"))
        b.many().node("roles!", fragment=lambda r: r.node("label"))
    ```

Every node operation returns the builder so calls can be chained.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsonshape.config.logging import get_logger
from jsonshape.core.errors import MissingFragmentError, UnexpectedNodeKindError
from jsonshape.core.types import MISSING, noop_fragment
from jsonshape.engine.deferred import DeferredArrayRegistry
from jsonshape.engine.options import NodeOptions, NodeShape, parse_node_name
from jsonshape.engine.resolve import (
    gate_subject,
    is_absent,
    materialize_sequence,
    passes_gate,
    resolve_object_for,
)

if TYPE_CHECKING:
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.core.types import Fragment, JSONObject, Predicate, ValueFn
    from jsonshape.engine.renderer import Renderer

logger: JsonShapeLogger = get_logger(__name__)


class Builder:
    """Render scope for one output mapping.

    Args:
        renderer (Renderer): Renderer used for nested renders and formatting.
        obj (Any): Current source object.
        output (JSONObject): Output mapping this scope writes into (shared, not copied).
    """

    __slots__ = ("_array_mode", "_deferred", "_obj", "_output", "_renderer")

    def __init__(self, renderer: Renderer, obj: Any, output: JSONObject) -> None:
        self._renderer: Renderer = renderer
        self._obj: Any = obj
        self._output: JSONObject = output
        self._array_mode: bool = False
        self._deferred: DeferredArrayRegistry = DeferredArrayRegistry()

    def __repr__(self) -> str:
        return f"Builder(obj={self._obj!r}, keys={list(self._output)!r})"

    # ------------------------------------------------------------------ state

    @property
    def current(self) -> Any:
        """The current source object."""
        return self._obj

    @property
    def output(self) -> JSONObject:
        """The output mapping of this scope."""
        return self._output

    @property
    def renderer(self) -> Renderer:
        """The renderer this scope belongs to."""
        return self._renderer

    def get(self) -> Any:
        """Return the current source object."""
        return self._obj

    def reassign(self, obj: Any) -> Builder:
        """Make ``obj`` the current source object for subsequent calls.

        No output is produced; later nodes in this scope resolve against ``obj``.
        """
        self._obj = obj
        return self

    def many(self) -> Builder:
        """Put the builder in array mode for the next node call only."""
        self._array_mode = True
        return self

    # --------------------------------------------------------------- dispatch

    def node(self, name: str, *args: Any, fragment: Any = None, **options: Any) -> Builder:
        """Declare a node, classifying it by its name suffix.

        ``name!`` is a nested object (an array in array mode), ``name?`` a
        nullable one, and any other name an attribute.

        Args:
            name (str): Node name including an optional ``!`` / ``?`` suffix.
            *args (Any): An optional object override followed by an optional
                options mapping (keys ``if``, ``unless``, ``inherit``).
            fragment (Any): Child fragment (a value callback for attributes).
            **options (Any): Keyword options (``if_``, ``unless``, ``inherit``,
                ``obj``), merged over the options mapping.

        Returns:
            Builder: ``self``.

        Raises:
            UnexpectedNodeKindError: If an attribute is declared in array mode.
        """
        key, shape = parse_node_name(name)
        opts: NodeOptions = NodeOptions.from_call(args, options, nullable=shape.nullable)

        if self._array_mode:
            self._array_mode = False
            if shape is NodeShape.ATTRIBUTE:
                raise UnexpectedNodeKindError(key)
            self._build_array(key, opts, fragment)
        elif shape.is_object:
            self._build_object(key, opts, fragment)
        else:
            self._build_attribute(key, opts, fragment)
        return self

    def attr(
        self,
        name: str,
        fragment: ValueFn | None = None,
        *,
        obj: Any = MISSING,
        if_: Predicate | None = None,
        unless: Predicate | None = None,
        inherit: bool = False,
    ) -> Builder:
        """Declare an attribute node.

        The value is ``fragment(obj or current object)`` when a value callback
        is given, otherwise the resolved object (``obj``, the current object
        when ``inherit`` is set, or the property ``name``). It passes through
        the formatter and overwrites any earlier value under ``name``.
        Methods are not called: a property that is a method renders null;
        use a value callback to render a method result.

        Returns:
            Builder: ``self``.
        """
        opts = NodeOptions(obj=obj, if_=if_, unless=unless, inherit=inherit)
        self._build_attribute(name, opts, fragment)
        return self

    def object(
        self,
        name: str,
        fragment: Fragment | None = None,
        *,
        obj: Any = MISSING,
        if_: Predicate | None = None,
        unless: Predicate | None = None,
        inherit: bool = False,
        nullable: bool = False,
    ) -> Builder:
        """Declare a nested object node rendered by ``fragment``.

        Repeated declarations of the same name extend the same mapping.

        Returns:
            Builder: ``self``.
        """
        opts = NodeOptions(obj=obj, if_=if_, unless=unless, inherit=inherit, nullable=nullable)
        self._build_object(name, opts, fragment)
        return self

    def array(
        self,
        name: str,
        fragment: Fragment | None = None,
        *,
        obj: Any = MISSING,
        if_: Predicate | None = None,
        unless: Predicate | None = None,
        inherit: bool = False,
        nullable: bool = False,
    ) -> Builder:
        """Declare an array node whose elements are rendered by ``fragment``.

        Rendering is deferred until this scope finalizes. Repeated declarations
        of the same name in this scope add fragments that render into the same
        elements.

        Returns:
            Builder: ``self``.
        """
        opts = NodeOptions(obj=obj, if_=if_, unless=unless, inherit=inherit, nullable=nullable)
        self._build_array(name, opts, fragment)
        return self

    def scope(self, fragment: Fragment | None = None, *, obj: Any = MISSING) -> Builder:
        """Run ``fragment`` into this scope's output mapping without a new key.

        With ``obj``, the fragment runs as a separate render of ``obj`` into the
        same mapping (its arrays are drained before this returns). Without it,
        the fragment is called with this builder.

        Returns:
            Builder: ``self``.

        Raises:
            MissingFragmentError: If no fragment is given.
        """
        if fragment is None:
            raise MissingFragmentError("scope() requires a fragment")
        if obj is not MISSING:
            self._renderer.render(obj, self._output, fragment)
        else:
            fragment(self)
        return self

    # ---------------------------------------------------------------- finalize

    def finalize(self) -> JSONObject:
        """Drain deferred arrays and return the output mapping."""
        if self._deferred:
            self._deferred.drain(self._renderer.render)
        return self._output

    # ----------------------------------------------------------- node builders

    def _build_attribute(self, name: str, options: NodeOptions, fragment: ValueFn | None) -> None:
        if not passes_gate(self._obj, options):
            logger.trace("Skipped attribute '%s' (condition)", name)
            return

        if fragment is not None:
            value: Any = fragment(gate_subject(self._obj, options))
        else:
            value = resolve_object_for(self._obj, name, options)

        self._output[name] = self._renderer.formatter(value, name)
        logger.trace("Wrote attribute '%s'", name)

    def _build_object(self, name: str, options: NodeOptions, fragment: Fragment | None) -> None:
        if not passes_gate(self._obj, options):
            logger.trace("Skipped object '%s' (condition)", name)
            return

        obj: Any = resolve_object_for(self._obj, name, options)

        if options.nullable and is_absent(obj):
            if not isinstance(self._output.get(name), dict):
                self._output[name] = None
            logger.trace("Object '%s' is absent", name)
            return

        target: Any = self._output.get(name)
        if not isinstance(target, dict):
            target = {}
            self._output[name] = target
        logger.trace("Rendering object '%s'", name)
        self._renderer.render(obj, target, fragment or noop_fragment)

    def _build_array(self, name: str, options: NodeOptions, fragment: Fragment | None) -> None:
        if not passes_gate(self._obj, options):
            logger.trace("Skipped array '%s' (condition)", name)
            return

        element_fragment: Fragment = fragment or noop_fragment

        if name in self._deferred:
            self._deferred.append(name, element_fragment)
            return

        obj: Any = resolve_object_for(self._obj, name, options)
        existing: Any = self._output.get(name)

        if is_absent(obj):
            if options.nullable:
                if not isinstance(existing, (dict, list)):
                    self._output[name] = None
            elif not isinstance(existing, list):
                self._output[name] = []
            logger.trace("Array '%s' is absent", name)
            return

        elements: tuple[Any, ...] = materialize_sequence(name, obj)
        if not isinstance(existing, list):
            existing = []
            self._output[name] = existing
        self._deferred.register(name, elements, existing, element_fragment)
