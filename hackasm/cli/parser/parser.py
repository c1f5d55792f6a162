from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hackasm.cli.errors import (
    InvalidInputFileExtensionError,
    InvalidOutputFileExtensionError,
    MissingArgumentsError,
    MissingOutputFilenameError,
)
from hackasm.cli.parser.arguments import CLIArguments
from hackasm.consts import OUTPUT_FILE_SUFFIX, SOURCE_FILE_SUFFIX

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    version = bool(args.version)
    source_filepath, output_filepath = None, None
    if not version:
        source_filepath, output_filepath = _process_filepaths(args)

    return CLIArguments(
        version=version,
        source_filepath=source_filepath,
        output_filepath=output_filepath,
        verbose=bool(args.verbose),
        show_symbols=bool(args.show_symbols),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_filepaths(args: Namespace) -> tuple[Path, Path]:
    if args.source_file is None:
        raise MissingArgumentsError
    source = Path(args.source_file)
    if source.suffix != SOURCE_FILE_SUFFIX:
        raise InvalidInputFileExtensionError(path=source)

    if args.output_file is None:
        raise MissingOutputFilenameError
    output = Path(args.output_file)
    if output.suffix != OUTPUT_FILE_SUFFIX:
        raise InvalidOutputFileExtensionError(path=output)

    return source, output
