# topmark:header:start
#
#   project      : JsonShape
#   file         : test_engine_conditions.py
#   file_relpath : tests/engine/test_engine_conditions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conditional gate: ``if`` / ``unless`` predicates on every node kind."""

from __future__ import annotations

from typing import Any

import pytest

from jsonshape import Builder, render


def _always(_: Any) -> bool:
    return True


def _never(_: Any) -> bool:
    return False


def test_unless_true_omits_attribute(ada: Any) -> None:
    """No key is written when ``unless`` holds."""
    assert render(ada, lambda b: b.attr("name", unless=_always).attr("age")) == {"age": 36}


def test_if_false_omits_attribute(ada: Any) -> None:
    """No key is written when ``if`` fails."""
    assert render(ada, lambda b: b.attr("name", if_=_never)) == {}


def test_if_true_keeps_attribute(ada: Any) -> None:
    assert render(ada, lambda b: b.attr("name", if_=_always)) == {"name": "Ada Lovelace"}


def test_both_predicates_must_agree(ada: Any) -> None:
    """``if`` and ``unless`` combine: emitted only when if holds and unless fails."""
    out = render(ada, lambda b: b.attr("name", if_=_always, unless=_always))

    assert out == {}


def test_gated_nullable_object_writes_nothing(ada: Any) -> None:
    """A failed condition on a nullable object writes no null either."""
    ada.address = None
    out = render(ada, lambda b: b.node("address?", {"if": _never}))

    assert out == {}


def test_gated_array_writes_nothing(ada: Any) -> None:
    """A failed condition on an array writes no empty list."""
    out = render(ada, lambda b: b.array("tags", unless=_always))

    assert out == {}


def test_gate_applies_inside_nested_scopes(ada: Any) -> None:
    """Conditions are evaluated per element inside arrays."""

    def tag(t: Builder) -> None:
        t.attr("label")
        t.attr("rhymes", lambda _: True, if_=lambda tg: tg.label == "poetry")

    out = render(ada, lambda b: b.array("tags", tag))

    assert out == {"tags": [{"label": "math"}, {"label": "poetry", "rhymes": True}]}


def test_predicate_receives_current_object(ada: Any) -> None:
    """Without an override, the predicate sees the scope's current object."""
    seen: list[Any] = []

    render(ada, lambda b: b.attr("name", if_=lambda o: seen.append(o) or True))

    assert seen == [ada]


def test_predicate_receives_explicit_override(ada: Any) -> None:
    """With an override, the predicate sees the override."""
    out = render(ada, lambda b: b.attr("level", obj=5, if_=lambda v: v == 5))

    assert out == {"level": 5}


def test_node_options_mapping_accepts_if_key(ada: Any) -> None:
    """The options mapping uses the plain ``if`` key."""
    out = render(ada, lambda b: b.node("name", {"if": _never}).node("age", {"unless": _never}))

    assert out == {"age": 36}


def test_predicate_errors_propagate(ada: Any) -> None:
    """Exceptions raised by predicates are not wrapped."""

    def boom(_: Any) -> bool:
        raise ValueError("predicate failed")

    with pytest.raises(ValueError, match="predicate failed"):
        render(ada, lambda b: b.attr("name", if_=boom))
