# topmark:header:start
#
#   project      : JsonShape
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the JsonShape test suite.

Sets TRACE logging for the whole run so engine traces show up in failure
reports, and shares small source-object fixtures used across test packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from jsonshape.config import logging


@dataclass
class Tag:
    label: str


@dataclass
class Address:
    city: str
    zip_code: str | None = None


@dataclass
class Person:
    name: str
    age: int = 0
    address: Address | None = None
    tags: list[Tag] = field(default_factory=lambda: [])
    _secret: str = "hidden"

    @property
    def initials(self) -> str:
        return "".join(part[:1] for part in self.name.split())


@pytest.fixture(autouse=True)
def silence_jsonshape_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv("JSONSHAPE_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def ada() -> Person:
    """A person with an address and two tags."""
    return Person(
        name="Ada Lovelace",
        age=36,
        address=Address(city="London", zip_code="W1"),
        tags=[Tag("math"), Tag("poetry")],
    )


@pytest.fixture
def ada_dict() -> dict[str, Any]:
    """The example document used throughout the docs."""
    return {"name": "Ada", "tags": ["x", "y"]}
