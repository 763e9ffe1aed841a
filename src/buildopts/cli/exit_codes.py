"""
Exit codes for ``buildopts describe``.

- 0: the registry was built and printed
- 1: the arguments could not be parsed or an option value failed to convert
- 2: a bad --group, --setting, --log-level or --config value
"""

from typing import Optional

import typer
from rich import print

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


class CliExit(typer.Exit):
    """typer.Exit that prints an optional Rich-markup message before exiting."""

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            print(message)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_CONFIG_ERROR, message)
