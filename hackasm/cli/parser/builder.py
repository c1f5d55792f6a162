import argparse
from argparse import ArgumentParser


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Hack assembler - translates Hack assembly into Hack machine code",
        usage=f"{prog} input.asm output.hack [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    # Both are optional for argparse, so absence is reported with an assembler error
    parser.add_argument(
        "source_file",
        help="Input source file in Hack assembly (`.asm` file)",
        nargs="?",
        default=None,
    )
    parser.add_argument(
        "output_file",
        help="Output file with Hack machine code (`.hack` file)",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    group = parser.add_argument_group("Debug", "Debugging and symbols inspection")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from assembler.",
    )
    group.add_argument(
        "--symbols",
        "-s",
        dest="show_symbols",
        required=False,
        action="store_true",
        help="If passed will display labels and variables with their addresses after assembling.",
    )

    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
    return parser
