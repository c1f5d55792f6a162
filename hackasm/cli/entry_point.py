from __future__ import annotations

import sys
from pathlib import Path

from hackasm.cli.errors.error_handler import cli_hackasm_error_handler
from hackasm.cli.goals import perform_desired_toolchain_goal
from hackasm.cli.parser.builder import build_cli_parser
from hackasm.cli.parser.parser import parse_cli_arguments

from .output import cli_message

# Program name shown in usage when started via `python -m hackasm` (or `hackasm.cli`)
MODULE_INVOCATION_PROG = "python -m hackasm"


def cli_entry_point(prog: str | None = None) -> None:
    """CLI main entry."""
    parser = build_cli_parser(prog or _infer_prog_name())
    namespace = parser.parse_args()
    wrapper = cli_hackasm_error_handler(
        debug_user_friendly_errors=namespace.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Arguments validation is also wrapped as it reports missing or improper files with errors
        args = parse_cli_arguments(namespace)
        perform_desired_toolchain_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in an CLI: toolchain must perform at least one goal!")
    sys.exit(1)


def _infer_prog_name() -> str:
    name = Path(sys.argv[0]).name
    return MODULE_INVOCATION_PROG if name == "__main__.py" else name


if __name__ == "__main__":
    cli_entry_point(prog=None)
