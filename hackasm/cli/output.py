"""Messages emitted by CLI into terminal."""

from __future__ import annotations

import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

_LEVEL_COLORS: dict[MessageLevel, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}
_RESET_COLOR = "\033[0m"


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit message with given level, INFO messages are hidden unless verbose."""
    if level == "INFO" and not verbose:
        return

    fd = sys.stderr if level == "ERROR" else sys.stdout
    prefix = f"[{level}]"
    if fd.isatty():
        prefix = f"{_LEVEL_COLORS[level]}{prefix}{_RESET_COLOR}"
    print(prefix, text, file=fd)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error and terminate with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
