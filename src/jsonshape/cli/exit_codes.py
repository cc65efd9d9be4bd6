# topmark:header:start
#
#   project      : JsonShape
#   file         : exit_codes.py
#   file_relpath : src/jsonshape/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the JsonShape CLI.

Codes follow BSD ``sysexits`` where a matching code exists.

Usage:
    ```python
    import subprocess
    from jsonshape.cli.exit_codes import ExitCode

    result = subprocess.run(["jsonshape", "render", "data.json", "--shape", "app:shape"])
    if result.returncode == ExitCode.DATA_ERROR:
        print("data.json is not valid JSON")
    ```
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by the JsonShape CLI."""

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    DATA_ERROR = 65
    NO_INPUT = 66
    CONFIG_ERROR = 78
