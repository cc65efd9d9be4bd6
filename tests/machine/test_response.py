# topmark:header:start
#
#   project      : JsonShape
#   file         : test_response.py
#   file_relpath : tests/machine/test_response.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic response payloads."""

from __future__ import annotations

import json
from typing import Any

from jsonshape import Builder
from jsonshape.machine import JsonResponse, render_response


def _status(b: Builder) -> None:
    b.attr("ok", obj=True)
    b.array("items", lambda e: e.attr("id", inherit=True), obj=[1, 2])


def test_response_without_source_object() -> None:
    response = render_response(_status)

    assert response.status == 200
    assert response.content_type == "application/json"
    assert response.data == {"ok": True, "items": [{"id": 1}, {"id": 2}]}
    assert json.loads(response.body) == response.data


def test_response_keeps_extra_headers_and_status(ada_dict: dict[str, Any]) -> None:
    response = render_response(
        lambda b: b.attr("name"),
        ada_dict,
        status=201,
        headers={"X-Trace": "abc", "Content-Type": "text/plain"},
    )

    assert response.status == 201
    assert response.headers == {"X-Trace": "abc", "Content-Type": "application/json"}
    assert response.data == {"name": "Ada"}


def test_encode_uses_utf8() -> None:
    response = render_response(lambda b: b.attr("city", obj="Zürich"))

    assert response.encode() == response.body.encode("utf-8")
    assert "Zürich" in response.body


def test_default_headers() -> None:
    response = JsonResponse(data={}, body="{}")

    assert response.headers == {"Content-Type": "application/json"}
