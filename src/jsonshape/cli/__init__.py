# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for JsonShape.

The ``jsonshape`` console script maps to [`jsonshape.cli.main.cli`][jsonshape.cli.main.cli].
Program output goes through a [`ClickConsole`][jsonshape.cli.console.ClickConsole];
internal diagnostics go through logging.
"""

from __future__ import annotations
