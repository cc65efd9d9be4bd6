# topmark:header:start
#
#   project      : JsonShape
#   file         : exports.py
#   file_relpath : src/jsonshape/registry/exports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-export declarations: attributes rendered for a type before any fragment runs.

A type may declare attribute names (and initializer fragments) that every
render of an instance includes by default. Declarations are collected in a
`MutableExportRegistry` and frozen into an immutable `ExportRegistry`, which a
[`Renderer`][jsonshape.engine.renderer.Renderer] holds. Nothing is attached to
the classes themselves and there is no process-wide registry.

Typical usage:
    ```python
    from jsonshape import MutableExportRegistry, Renderer

    draft = MutableExportRegistry()

    @draft.exports("id", "name")
    class User: ...

    renderer = Renderer(exports=draft.freeze())
    ```

Lookup walks the MRO, so a subclass without its own declaration inherits the
nearest declared base class entry.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeVar

from jsonshape.config.logging import get_logger

if TYPE_CHECKING:
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.core.types import Fragment

logger: JsonShapeLogger = get_logger(__name__)

T = TypeVar("T", bound=type)


@dataclass(frozen=True, slots=True)
class ExportSpec:
    """Exports declared for one type.

    Attributes:
        attributes (tuple[str, ...]): Attribute names, ordered and de-duplicated.
        fragments (tuple[Fragment, ...]): Initializer fragments, run after the
            attributes and before the explicit fragment.
    """

    attributes: tuple[str, ...] = ()
    fragments: tuple[Fragment, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.attributes or self.fragments)

    def extended(
        self,
        attributes: tuple[str, ...] = (),
        fragments: tuple[Fragment, ...] = (),
    ) -> ExportSpec:
        """Return a new spec with ``attributes`` and ``fragments`` appended."""
        merged: list[str] = list(self.attributes)
        for name in attributes:
            if name not in merged:
                merged.append(name)
        return ExportSpec(
            attributes=tuple(merged),
            fragments=self.fragments + tuple(fragments),
        )


EMPTY_EXPORTS = ExportSpec()


@dataclass(frozen=True, slots=True)
class ExportRegistry:
    """Immutable mapping of types to their export declarations.

    Use `ExportRegistry.thaw` → edit → `MutableExportRegistry.freeze` to
    derive an updated registry.
    """

    entries: Mapping[type, ExportSpec] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def lookup(self, cls: type) -> ExportSpec:
        """Return the exports for ``cls``, falling back along its MRO.

        Args:
            cls (type): Type to look up.

        Returns:
            ExportSpec: The nearest declared spec, or an empty spec.
        """
        for klass in cls.__mro__:
            spec: ExportSpec | None = self.entries.get(klass)
            if spec is not None:
                return spec
        return EMPTY_EXPORTS

    def for_object(self, obj: object) -> ExportSpec:
        """Return the exports for the type of ``obj``."""
        if not self.entries:
            return EMPTY_EXPORTS
        return self.lookup(type(obj))

    def types(self) -> Iterator[type]:
        """Iterate the types with an explicit declaration."""
        return iter(self.entries)

    def thaw(self) -> MutableExportRegistry:
        """Return a mutable copy of this registry."""
        return MutableExportRegistry(entries=dict(self.entries))


@dataclass
class MutableExportRegistry:
    """Mutable builder for an [`ExportRegistry`][jsonshape.registry.exports.ExportRegistry]."""

    entries: dict[type, ExportSpec] = field(default_factory=lambda: {})

    def declare(
        self,
        cls: type,
        *attributes: str,
        fragment: Fragment | None = None,
    ) -> MutableExportRegistry:
        """Declare exported attributes (and optionally an initializer) for ``cls``.

        Repeated declarations for the same type accumulate: attribute names are
        appended unless already present, fragments are appended in order.

        Args:
            cls (type): The type being declared.
            *attributes (str): Attribute names to render automatically.
            fragment (Fragment | None): Initializer fragment to run for every instance.

        Returns:
            MutableExportRegistry: ``self``, for chaining.
        """
        for name in attributes:
            if not name:
                raise ValueError("exported attribute name must be a non-empty string")
        current: ExportSpec = self.entries.get(cls, EMPTY_EXPORTS)
        self.entries[cls] = current.extended(
            tuple(attributes),
            (fragment,) if fragment is not None else (),
        )
        logger.debug("Declared exports for %s: %s", cls.__qualname__, self.entries[cls])
        return self

    def exports(
        self,
        *attributes: str,
        fragment: Fragment | None = None,
    ) -> Callable[[T], T]:
        """Class decorator form of `declare`."""

        def _decorator(cls: T) -> T:
            self.declare(cls, *attributes, fragment=fragment)
            return cls

        return _decorator

    def merge_with(self, other: MutableExportRegistry) -> MutableExportRegistry:
        """Merge ``other`` into this registry; ``other``'s additions come last."""
        for cls, spec in other.entries.items():
            current: ExportSpec = self.entries.get(cls, EMPTY_EXPORTS)
            self.entries[cls] = current.extended(spec.attributes, spec.fragments)
        return self

    def freeze(self) -> ExportRegistry:
        """Freeze this builder into an immutable `ExportRegistry`."""
        return ExportRegistry(entries=MappingProxyType(dict(self.entries)))
