# topmark:header:start
#
#   project      : JsonShape
#   file         : test_engine_dispatch.py
#   file_relpath : tests/engine/test_engine_dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node dispatch by name suffix, array mode and option parsing."""

from __future__ import annotations

from typing import Any

import pytest

from jsonshape import MISSING, Builder, Renderer, UnexpectedNodeKindError, render
from jsonshape.engine.options import NodeOptions, NodeShape, parse_node_name


@pytest.mark.parametrize(
    ("name", "key", "shape"),
    [
        ("name", "name", NodeShape.ATTRIBUTE),
        ("address!", "address", NodeShape.OBJECT),
        ("address?", "address", NodeShape.NULLABLE_OBJECT),
        ("odd!?", "odd!", NodeShape.NULLABLE_OBJECT),
    ],
)
def test_parse_node_name(name: str, key: str, shape: NodeShape) -> None:
    """The suffix selects the shape and is stripped from the key."""
    assert parse_node_name(name) == (key, shape)


@pytest.mark.parametrize("name", ["", "!", "?"])
def test_parse_node_name_rejects_empty_keys(name: str) -> None:
    """A name must leave a non-empty key once the suffix is removed."""
    with pytest.raises(ValueError, match="key must be non-empty"):
        parse_node_name(name)


def test_node_shape_flags() -> None:
    """Only ``?`` nodes are nullable; both suffixes are object-shaped."""
    assert not NodeShape.ATTRIBUTE.is_object
    assert NodeShape.OBJECT.is_object and not NodeShape.OBJECT.nullable
    assert NodeShape.NULLABLE_OBJECT.is_object and NodeShape.NULLABLE_OBJECT.nullable


def test_attribute_in_array_mode_raises() -> None:
    """A plain attribute name is an error right after `many()`."""
    builder = Builder(Renderer(), {"name": "Ada"}, {})

    with pytest.raises(UnexpectedNodeKindError) as excinfo:
        builder.many().node("name")

    assert excinfo.value.name == "name"
    assert "name" in str(excinfo.value)
    assert builder.output == {}


def test_array_mode_is_cleared_after_a_failed_call() -> None:
    """The flag is consumed even when the call raises."""
    builder = Builder(Renderer(), {"name": "Ada"}, {})

    with pytest.raises(UnexpectedNodeKindError):
        builder.many().node("name")
    builder.node("name")

    assert builder.output == {"name": "Ada"}


def test_array_mode_applies_to_one_node_only(ada_dict: dict[str, Any]) -> None:
    """After an array node, the next `!` node is a nested object again."""
    source = {**ada_dict, "meta": {"id": 7}}

    def shape(b: Builder) -> None:
        b.many().node("tags!", fragment=lambda t: t.attr("v", inherit=True))
        b.node("meta!", fragment=lambda m: m.attr("id"))

    out = render(source, shape)
    assert out == {"tags": [{"v": "x"}, {"v": "y"}], "meta": {"id": 7}}


def test_array_mode_is_consumed_by_a_gated_node(ada_dict: dict[str, Any]) -> None:
    """A node skipped by its condition still consumes array mode."""

    def shape(b: Builder) -> None:
        b.many().node("tags!", {"if": lambda _: False})
        b.node("name")

    assert render(ada_dict, shape) == {"name": "Ada"}


def test_node_returns_builder_for_chaining(ada_dict: dict[str, Any]) -> None:
    """Every node call returns the builder itself."""
    builder = Builder(Renderer(), ada_dict, {})

    assert builder.node("name") is builder
    assert builder.many() is builder


def test_node_attribute_with_value_callback(ada_dict: dict[str, Any]) -> None:
    """For attributes the fragment argument is a value callback."""
    out = render(ada_dict, lambda b: b.node("count", fragment=lambda d: len(d["tags"])))

    assert out == {"count": 2}


def test_node_positional_override_and_options() -> None:
    """A leading positional is the object; a trailing mapping holds options."""
    out = render({}, lambda b: b.node("who", "Grace", {"unless": lambda who: who == "Ada"}))

    assert out == {"who": "Grace"}


class TestNodeOptionsFromCall:
    """Parsing of node call arguments."""

    def test_defaults(self) -> None:
        opts = NodeOptions.from_call((), {})
        assert opts.obj is MISSING
        assert not opts.has_override
        assert opts.if_ is None and opts.unless is None
        assert not opts.inherit and not opts.nullable

    def test_options_mapping_and_keywords(self) -> None:
        def yes(_: Any) -> bool:
            return True

        def no(_: Any) -> bool:
            return False

        opts = NodeOptions.from_call(({"if": yes, "unless": yes},), {"unless": no})
        assert opts.if_ is yes
        assert opts.unless is no

    def test_if_alias(self) -> None:
        def check(_: Any) -> bool:
            return True

        assert NodeOptions.from_call((), {"if_": check}).if_ is check

    def test_explicit_none_override(self) -> None:
        opts = NodeOptions.from_call((None,), {})
        assert opts.has_override
        assert opts.obj is None

    def test_obj_keyword(self) -> None:
        assert NodeOptions.from_call((), {"obj": 3}).obj == 3

    def test_inherit_flag(self) -> None:
        assert NodeOptions.from_call(({"inherit": True},), {}).inherit

    def test_nullable_comes_from_the_name(self) -> None:
        assert NodeOptions.from_call((), {}, nullable=True).nullable

    def test_too_many_overrides(self) -> None:
        with pytest.raises(TypeError):
            NodeOptions.from_call((1, 2), {})

    def test_positional_and_obj_keyword_conflict(self) -> None:
        with pytest.raises(TypeError):
            NodeOptions.from_call((1,), {"obj": 2})

    def test_unknown_options_are_ignored(self) -> None:
        opts = NodeOptions.from_call(({"colour": "red"},), {})
        assert opts == NodeOptions()
