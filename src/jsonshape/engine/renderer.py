# topmark:header:start
#
#   project      : JsonShape
#   file         : renderer.py
#   file_relpath : src/jsonshape/engine/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render entry point.

A [`Renderer`][jsonshape.engine.renderer.Renderer] bundles the formatter and
the export registry; it holds no per-render state and may be shared. Each call
to `Renderer.render` is one self-contained pass:

1. use the handed-in output mapping (merge-into) or a fresh one,
2. create a [`Builder`][jsonshape.engine.builder.Builder] scope,
3. apply the exports declared for the object's type,
4. run the fragment,
5. drain the deferred arrays, and
6. return the output mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jsonshape.config.logging import get_logger
from jsonshape.core.formatter import JsonFormatter
from jsonshape.engine.builder import Builder
from jsonshape.registry.exports import ExportRegistry

if TYPE_CHECKING:
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.config.model import Config
    from jsonshape.core.formatter import Formatter
    from jsonshape.core.types import Fragment, JSONObject
    from jsonshape.registry.exports import ExportSpec

logger: JsonShapeLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Renderer:
    """Immutable render setup: formatter plus per-type exports.

    Attributes:
        formatter (Formatter): Applied to every attribute value.
        exports (ExportRegistry): Attributes and initializer fragments rendered
            automatically for declared types.
    """

    formatter: Formatter = field(default_factory=JsonFormatter)
    exports: ExportRegistry = field(default_factory=ExportRegistry)

    @classmethod
    def from_config(cls, config: Config, *, exports: ExportRegistry | None = None) -> Renderer:
        """Build a renderer whose formatter follows the ``[format]`` settings of ``config``."""
        formatter = JsonFormatter(
            datetime_format=config.datetime_format,
            enum_style=config.enum_style,
        )
        return cls(formatter=formatter, exports=exports or ExportRegistry())

    def render(
        self,
        obj: Any = None,
        output: Any = None,
        fragment: Fragment | None = None,
    ) -> JSONObject:
        """Render ``obj`` through ``fragment``.

        Args:
            obj (Any): Root source object.
            output (Any): Existing mapping to render into; a fresh ``dict`` is
                used when this is not a ``dict``.
            fragment (Fragment | None): Description to run against the scope.

        Returns:
            JSONObject: The output mapping.
        """
        target: JSONObject = output if isinstance(output, dict) else {}
        builder = Builder(self, obj, target)

        spec: ExportSpec = self.exports.for_object(obj)
        if spec:
            logger.trace("Applying exports for %s", type(obj).__qualname__)
            for name in spec.attributes:
                builder.attr(name)
            for init in spec.fragments:
                builder.scope(init)

        if fragment is not None:
            builder.scope(fragment)

        return builder.finalize()


_DEFAULT_RENDERER = Renderer()


def render(
    obj: Any = None,
    fragment: Fragment | None = None,
    *,
    output: Any = None,
    renderer: Renderer | None = None,
) -> JSONObject:
    """Render ``obj`` through ``fragment`` with the default (or given) renderer.

    Example:
        ```python
        render({"name": "Ada"}, lambda b: b.attr("name"))
        # {"name": "Ada"}
        ```
    """
    return (renderer or _DEFAULT_RENDERER).render(obj, output, fragment)
