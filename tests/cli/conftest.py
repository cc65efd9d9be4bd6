# topmark:header:start
#
#   project      : JsonShape
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running JsonShape in a controlled working directory.

`run_cli` changes the process working directory to ``tmp_path`` before
invoking the Click CLI, so relative source paths resolve against the test
directory and config discovery starts there. `shape_module` writes a small
module of shape callables and makes it importable for ``--shape``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from jsonshape.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

RunCli = Callable[..., Result]

SHAPES_SOURCE = '''
def person(b):
    b.attr("name")
    b.many().node("tags!", fragment=lambda t: t.attr("upper", lambda tag: tag.upper()))


def broken(b):
    b.many().node("name")


class Shapes:
    @staticmethod
    def name_only(b):
        b.attr("name")


not_callable = 42
'''


@pytest.fixture
def run_cli(tmp_path: Path) -> RunCli:
    """Return a helper invoking the CLI with ``tmp_path`` as working directory.

    Example:
        ```python
        result = run_cli(["render", "data.json", "--shape", "shapes:person"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """

    def _run(
        argv: str | Sequence[str] | None,
        *,
        input_text: str | bytes | IO[Any] | None = None,
    ) -> Result:
        runner = CliRunner()
        cwd: str = os.getcwd()
        try:
            os.chdir(tmp_path)
            return runner.invoke(cli, argv, input=input_text)
        finally:
            os.chdir(cwd)

    return _run


@pytest.fixture
def shape_module(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    request: pytest.FixtureRequest,
) -> str:
    """Write an importable shapes module and return its (test-unique) name."""
    name: str = re.sub(r"\W", "_", f"shapes_{request.node.name}")
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / f"{name}.py").write_text(SHAPES_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(lib))
    return name


@pytest.fixture
def people_json(tmp_path: Path) -> Path:
    """A JSON source document in ``tmp_path``."""
    path = tmp_path / "people.json"
    path.write_text('{"name": "Ada", "tags": ["x", "y"], "age": 36}', encoding="utf-8")
    return path
