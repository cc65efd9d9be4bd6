# topmark:header:start
#
#   project      : JsonShape
#   file         : __main__.py
#   file_relpath : src/jsonshape/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JsonShape via ``python -m jsonshape``.

It delegates directly to :func:`jsonshape.cli.main.cli`, so the module form
and the ``jsonshape`` console script behave the same.

Examples:
    Render a JSON document through a shape callable::

        python -m jsonshape render data.json --shape myapp.shapes:user
"""

from __future__ import annotations

from jsonshape.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
