# topmark:header:start
#
#   project      : JsonShape
#   file         : response.py
#   file_relpath : src/jsonshape/machine/response.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic JSON response payloads.

Web integrations render a description and hand the result to their own
response type. `render_response` does the rendering and serialization; the
returned [`JsonResponse`][jsonshape.machine.response.JsonResponse] carries the
status, headers and body a framework adapter needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jsonshape.constants import JSON_CONTENT_TYPE
from jsonshape.machine.serializers import resolve_renderer, serialize_with_config

if TYPE_CHECKING:
    from jsonshape.config.model import Config
    from jsonshape.core.types import Fragment, JSONObject
    from jsonshape.engine.renderer import Renderer


@dataclass(frozen=True, slots=True)
class JsonResponse:
    """Rendered JSON payload ready to be returned by a web handler.

    Attributes:
        data (JSONObject): The rendered tree.
        body (str): The serialized JSON text.
        status (int): HTTP status code.
        headers (dict[str, str]): Response headers (``Content-Type`` always set).
    """

    data: JSONObject
    body: str
    status: int = 200
    headers: dict[str, str] = field(default_factory=lambda: {"Content-Type": JSON_CONTENT_TYPE})

    @property
    def content_type(self) -> str:
        """The ``Content-Type`` header value."""
        return self.headers["Content-Type"]

    def encode(self, encoding: str = "utf-8") -> bytes:
        """Return the body as bytes."""
        return self.body.encode(encoding)


def render_response(
    fragment: Fragment | None,
    obj: Any = None,
    *,
    status: int = 200,
    headers: dict[str, str] | None = None,
    renderer: Renderer | None = None,
    config: Config | None = None,
) -> JsonResponse:
    """Render ``fragment`` (against ``obj``, if any) into a `JsonResponse`.

    Args:
        fragment: Description to render with.
        obj: Root source object; fragments that only use explicit objects may omit it.
        status: HTTP status code.
        headers: Extra headers; ``Content-Type`` is always ``application/json``.
        renderer: Renderer to use; built from ``config`` (or defaults) when None.
        config: Output and format settings.

    Returns:
        JsonResponse: The response payload.
    """
    data: JSONObject = resolve_renderer(renderer, config).render(obj, None, fragment)
    body: str = serialize_with_config(data, config)

    merged: dict[str, str] = dict(headers or {})
    merged["Content-Type"] = JSON_CONTENT_TYPE
    return JsonResponse(data=data, body=body, status=status, headers=merged)
