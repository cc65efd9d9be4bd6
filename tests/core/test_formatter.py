# topmark:header:start
#
#   project      : JsonShape
#   file         : test_formatter.py
#   file_relpath : tests/core/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value normalization performed by the default formatter."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum, IntEnum
from pathlib import PurePosixPath
from typing import Any
from uuid import UUID

import pytest

from jsonshape import JsonFormatter, identity_formatter
from jsonshape.core.formatter import normalize_payload


class Status(Enum):
    ACTIVE = "active"
    RETIRED = "retired"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


@dataclass
class Point:
    x: int
    y: int

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "when": date(2024, 1, 2)}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        (True, True),
        (3, 3),
        (1.5, 1.5),
        ("text", "text"),
        (date(2024, 1, 2), "2024-01-02"),
        (datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc), "2024-01-02T03:04:05+00:00"),
        (time(13, 30), "13:30:00"),
        (Decimal("1.10"), "1.10"),
        (UUID("12345678-1234-5678-1234-567812345678"), "12345678-1234-5678-1234-567812345678"),
        (PurePosixPath("/tmp/out.json"), "/tmp/out.json"),
        (Status.ACTIVE, "ACTIVE"),
        (Priority.HIGH, "HIGH"),
    ],
)
def test_default_normalization(value: Any, expected: Any) -> None:
    assert JsonFormatter()(value, "field") == expected


def test_enum_value_style() -> None:
    fmt = JsonFormatter(enum_style="value")

    assert fmt(Status.RETIRED, "status") == "retired"
    assert fmt(Priority.LOW, "priority") == 1


def test_datetime_format_pattern() -> None:
    fmt = JsonFormatter(datetime_format="%d/%m/%Y")

    assert fmt(date(2024, 1, 2), "born") == "02/01/2024"
    assert fmt(datetime(2024, 1, 2, 3, 4), "at") == "02/01/2024"


def test_containers_are_normalized_recursively() -> None:
    value = {1: (date(2024, 1, 2), {Status.ACTIVE}), "p": Point(1, 2)}

    assert JsonFormatter()(value, "field") == {
        "1": ["2024-01-02", ["ACTIVE"]],
        "p": {"x": 1, "y": 2, "when": "2024-01-02"},
    }


def test_unknown_objects_pass_through() -> None:
    marker = object()

    assert JsonFormatter()(marker, "field") is marker


def test_identity_formatter() -> None:
    value = date(2024, 1, 2)

    assert identity_formatter(value, "field") is value


def test_normalize_payload_uses_defaults() -> None:
    assert normalize_payload({"d": date(2024, 1, 2), "e": Status.ACTIVE}) == {
        "d": "2024-01-02",
        "e": "ACTIVE",
    }
