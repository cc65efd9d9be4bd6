# topmark:header:start
#
#   project      : JsonShape
#   file         : test_errors.py
#   file_relpath : tests/core/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Engine exception hierarchy."""

from __future__ import annotations

import pytest

from jsonshape import (
    JsonShapeError,
    MissingFragmentError,
    NotIterableError,
    UnexpectedNodeKindError,
)


@pytest.mark.parametrize(
    "error",
    [
        UnexpectedNodeKindError("name"),
        MissingFragmentError("scope() requires a fragment"),
        NotIterableError("items", 3),
    ],
)
def test_engine_errors_share_a_base(error: Exception) -> None:
    assert isinstance(error, JsonShapeError)


def test_unexpected_node_kind_message() -> None:
    message = "Unexpected attribute node `title` in array mode"
    assert str(UnexpectedNodeKindError("title")) == message


def test_not_iterable_error_keeps_value() -> None:
    error = NotIterableError("items", 3)

    assert error.value == 3
    assert "int" in str(error)
