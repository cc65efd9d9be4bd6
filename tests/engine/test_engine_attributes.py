# topmark:header:start
#
#   project      : JsonShape
#   file         : test_engine_attributes.py
#   file_relpath : tests/engine/test_engine_attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute nodes: resolution order, value callbacks and the formatter hook."""

from __future__ import annotations

from datetime import date
from typing import Any

from jsonshape import Builder, Renderer, identity_formatter, render


def test_attributes_resolve_properties(ada: Any) -> None:
    """Each attribute call writes exactly one key from the property of the same name."""
    out = render(ada, lambda b: b.attr("name").attr("age"))

    assert out == {"name": "Ada Lovelace", "age": 36}


def test_attribute_reads_python_properties(ada: Any) -> None:
    """`@property` values resolve like plain attributes."""
    assert render(ada, lambda b: b.attr("initials")) == {"initials": "AL"}


def test_missing_property_renders_null(ada: Any) -> None:
    """A missing property is not an error: the value is None."""
    assert render(ada, lambda b: b.attr("nickname")) == {"nickname": None}


def test_private_names_are_never_resolved(ada: Any) -> None:
    """Names starting with an underscore resolve to None."""
    assert render(ada, lambda b: b.attr("_secret")) == {"_secret": None}


def test_mapping_sources_resolve_keys() -> None:
    """Mappings are looked up by key."""
    out = render({"name": "Ada", "lang": "en"}, lambda b: b.attr("lang").attr("name"))

    assert out == {"lang": "en", "name": "Ada"}
    assert list(out) == ["lang", "name"]


def test_value_callback_receives_current_object(ada: Any) -> None:
    """A value callback is called with the current source object."""
    out = render(ada, lambda b: b.attr("shout", lambda p: p.name.upper()))

    assert out == {"shout": "ADA LOVELACE"}


def test_explicit_object_overrides_lookup(ada: Any) -> None:
    """An explicit object is used as value, and handed to a value callback."""

    def shape(b: Builder) -> None:
        b.attr("name", obj="Grace")
        b.attr("length", lambda s: len(s), obj="abc")

    assert render(ada, shape) == {"name": "Grace", "length": 3}


def test_explicit_none_is_an_override(ada: Any) -> None:
    """Passing ``obj=None`` explicitly renders null instead of the property."""
    assert render(ada, lambda b: b.attr("name", obj=None)) == {"name": None}


def test_inherit_uses_current_object() -> None:
    """`inherit` renders the current object itself."""
    assert render("hello", lambda b: b.attr("value", inherit=True)) == {"value": "hello"}


def test_later_attribute_overwrites_earlier(ada: Any) -> None:
    """Attribute writes are last-write-wins and keep the original key position."""

    def shape(b: Builder) -> None:
        b.attr("name")
        b.attr("age")
        b.attr("name", lambda p: "overridden")

    out = render(ada, shape)
    assert out == {"name": "overridden", "age": 36}
    assert list(out) == ["name", "age"]


def test_formatter_receives_value_and_name(ada: Any) -> None:
    """Every attribute value passes through the formatter keyed by its name."""
    calls: list[tuple[Any, str]] = []

    def formatter(value: Any, name: str) -> Any:
        calls.append((value, name))
        return f"{name}={value}"

    renderer = Renderer(formatter=formatter)
    out = renderer.render(ada, None, lambda b: b.attr("name").attr("age"))

    assert out == {"name": "name=Ada Lovelace", "age": "age=36"}
    assert calls == [("Ada Lovelace", "name"), (36, "age")]


def test_default_formatter_converts_dates() -> None:
    """The default renderer writes dates as ISO 8601 text."""
    out = render({"born": date(1815, 12, 10)}, lambda b: b.attr("born"))

    assert out == {"born": "1815-12-10"}


def test_identity_formatter_keeps_raw_values() -> None:
    """With the identity formatter, values are written unchanged."""
    born = date(1815, 12, 10)
    renderer = Renderer(formatter=identity_formatter)

    assert renderer.render({"born": born}, None, lambda b: b.attr("born")) == {"born": born}


def test_mapping_keys_with_underscore_resolve() -> None:
    """Mapping keys are looked up as-is, leading underscore included."""
    source = {"_id": 5, "_links": {"self": "/a"}}

    out = render(source, lambda b: b.attr("_id").object("_links", lambda ln: ln.attr("self")))

    assert out == {"_id": 5, "_links": {"self": "/a"}}


class Labelled:
    kind = "plain"

    def label(self) -> str:
        return "called"


def test_methods_are_not_called() -> None:
    """A property that is a method renders null; a value callback can call it."""

    def shape(b: Builder) -> None:
        b.attr("kind")
        b.attr("label")
        b.attr("shown", lambda obj: obj.label())

    assert render(Labelled(), shape) == {"kind": "plain", "label": None, "shown": "called"}
