# topmark:header:start
#
#   project      : JsonShape
#   file         : deferred.py
#   file_relpath : src/jsonshape/engine/deferred.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deferred array rendering.

Array nodes are not rendered when they are declared. The first declaration of
an array name in a scope captures the source elements and the output list;
later declarations of the same name in that scope only contribute another
fragment. When the scope finalizes, every element is rendered once per
fragment, in registration order, into the same element mapping:

    ```python
    b.array("points", lambda p: p.attr("x").attr("y"))
    ...
    b.array("points", lambda p: p.attr("label"))
    # points == [{"x": ..., "y": ..., "label": ...}, ...]
    ```

Elements are matched by position, never by identity or key. The source
sequence registered first is the only one used for a name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jsonshape.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.core.types import Fragment, JSONObject

    # Renders one element: (element, existing element output, fragment) -> output
    ElementRenderer = Callable[[Any, Any, Fragment], JSONObject]

logger: JsonShapeLogger = get_logger(__name__)


@dataclass(slots=True)
class DeferredArray:
    """A registered array awaiting rendering.

    Attributes:
        name (str): Output key of the array.
        elements (tuple[Any, ...]): Source elements, materialized at registration.
        target (list[Any]): Output list the rendered elements are written into.
        fragments (list[Fragment]): Element fragments in registration order.
    """

    name: str
    elements: tuple[Any, ...]
    target: list[Any]
    fragments: list[Fragment] = field(default_factory=lambda: [])

    def drain(self, render_element: ElementRenderer) -> None:
        """Render every element once per fragment, merging into ``target``."""
        target: list[Any] = self.target
        for i, element in enumerate(self.elements):
            for fragment in self.fragments:
                existing: Any = target[i] if i < len(target) else None
                rendered: JSONObject = render_element(element, existing, fragment)
                if i < len(target):
                    target[i] = rendered
                else:
                    target.append(rendered)


@dataclass(slots=True)
class DeferredArrayRegistry:
    """Per-scope registry of deferred arrays, keyed by output name."""

    entries: dict[str, DeferredArray] = field(default_factory=lambda: {})

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DeferredArray]:
        return iter(self.entries.values())

    def register(
        self,
        name: str,
        elements: tuple[Any, ...],
        target: list[Any],
        fragment: Fragment,
    ) -> DeferredArray:
        """Register the first declaration of array ``name``."""
        entry = DeferredArray(name=name, elements=elements, target=target, fragments=[fragment])
        self.entries[name] = entry
        logger.trace("Deferred array '%s' with %d element(s)", name, len(elements))
        return entry

    def append(self, name: str, fragment: Fragment) -> None:
        """Add another element fragment to the already registered array ``name``."""
        entry: DeferredArray = self.entries[name]
        entry.fragments.append(fragment)
        logger.trace("Array '%s' now has %d fragment(s)", name, len(entry.fragments))

    def drain(self, render_element: ElementRenderer) -> None:
        """Render all registered arrays and clear the registry."""
        entries: list[DeferredArray] = list(self.entries.values())
        self.entries.clear()
        for entry in entries:
            logger.trace(
                "Draining array '%s': %d element(s) x %d fragment(s)",
                entry.name,
                len(entry.elements),
                len(entry.fragments),
            )
            entry.drain(render_element)
