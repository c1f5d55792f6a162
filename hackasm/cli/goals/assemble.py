from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hackasm.assembler import assemble_file
from hackasm.cli.output import cli_message

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hackasm.cli.parser.arguments import CLIArguments
    from hackasm.symbols import SymbolTable


def cli_perform_assemble_goal(args: CLIArguments) -> NoReturn:
    """Assemble input source file into output file."""
    assert args.source_filepath is not None
    assert args.output_filepath is not None

    cli_message(
        level="INFO",
        text=f"Assembling `{args.source_filepath}` into `{args.output_filepath}`...",
        verbose=args.verbose,
    )
    state = assemble_file(args.source_filepath, args.output_filepath)

    cli_message(
        level="INFO",
        text=f"Resolved {len(state.symbols.labels())} label(s) and allocated {len(state.symbols.variables())} variable(s)",
        verbose=args.verbose,
    )
    if args.show_symbols:
        cli_emit_symbol_table(state.symbols)

    cli_message(
        level="INFO",
        text=f"Assembled {state.words_emitted} instruction(s) into `{args.output_filepath.name}`!",
        verbose=args.verbose,
    )
    return sys.exit(0)


def cli_emit_symbol_table(symbols: SymbolTable) -> None:
    """Display labels and variables (without predefined symbols) with their addresses."""
    _emit_symbols_section("Labels (ROM)", symbols.labels())
    _emit_symbols_section("Variables (RAM)", symbols.variables())


def _emit_symbols_section(title: str, section: Mapping[str, int]) -> None:
    print(f"[{title}]")
    if not section:
        print("\t(none)")
        return
    width = max(map(len, section))
    for name, address in sorted(section.items(), key=lambda item: item[1]):
        print(f"\t{name:<{width}} {address:>5}")
