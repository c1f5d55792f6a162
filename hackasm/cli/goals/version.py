import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from hackasm.cli.parser.arguments import CLIArguments
from hackasm.consts import (
    INSTRUCTION_WORD_WIDTH,
    VARIABLE_ADDRESS_LIMIT,
    VARIABLE_BASE_ADDRESS,
)


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    try:
        toolchain_version = version("hackasm")
    except PackageNotFoundError:
        toolchain_version = "(not installed)"

    print("[Hack assembler toolchain]")
    print(f"\tVersion: {toolchain_version}")
    print(f"\tInstruction word width: {INSTRUCTION_WORD_WIDTH} bits")
    print(f"\tVariables RAM: {VARIABLE_BASE_ADDRESS}..{VARIABLE_ADDRESS_LIMIT}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)
