from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole assembler toolchain process."""

    # Goals
    version: bool

    # None only when goal does not require files (e.g version)
    source_filepath: Path | None
    output_filepath: Path | None

    verbose: bool
    show_symbols: bool

    cli_debug_user_friendly_errors: bool
