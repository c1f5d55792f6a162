import sys
from collections.abc import Generator
from contextlib import contextmanager

from hackasm.cli.output import cli_fatal_abort, cli_message
from hackasm.exceptions import HackAssemblerError


@contextmanager
def cli_hackasm_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None]:
    """Wrap CLI goal to properly emit assembler errors."""
    try:
        yield
    except HackAssemblerError as ae:
        if debug_user_friendly_errors:
            cli_fatal_abort(repr(ae))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        sys.exit(0)
