"""Two-pass assembler core.

First pass scans source lines and records label addresses,
second pass resolves symbols (allocating variables on first use) and emits instruction words.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, assert_never

from hackasm.codegen.encoder import (
    encode_address_instruction,
    encode_compute_instruction,
)
from hackasm.io import read_source_file_lines, write_instruction_words
from hackasm.parser import InstructionType, parse_lines
from hackasm.symbols import SymbolTable

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Sequence
    from pathlib import Path

    from hackasm.parser import Instruction


class AssemblerStage(Enum):
    INITIAL = auto()
    PASS1_SCANNING = auto()
    PASS1_DONE = auto()
    PASS2_TRANSLATING = auto()
    COMPLETE = auto()


@dataclass(frozen=False)
class AssemblerState:
    """State of an single assembler run, owns source lines and symbol table."""

    lines: Sequence[str]
    source: Path | None = None

    symbols: SymbolTable = field(default_factory=SymbolTable)
    stage: AssemblerStage = AssemblerStage.INITIAL

    # Amount of words emitted by second pass
    words_emitted: int = 0


def assemble_from_lines(
    lines: Iterable[str],
    *,
    source: Path | None = None,
    state: AssemblerState | None = None,
) -> Generator[int]:
    """Assemble given source lines into stream of instruction words.

    Whole first pass is done before first word is yielded.
    Given state (if any) is used as-is, and lines are ignored in favor of state lines.

    :returns assembler: Generator of 16-bit instruction words, in program order
    """
    if state is None:
        state = AssemblerState(lines=list(lines), source=source)
    assert state.stage == AssemblerStage.INITIAL, "Assembler state cannot be reused"

    run_first_pass(state)
    yield from run_second_pass(state)


def assemble_file(input_path: Path, output_path: Path) -> AssemblerState:
    """Assemble source file into an output file with one binary word per line."""
    state = AssemblerState(lines=read_source_file_lines(input_path), source=input_path)
    write_instruction_words(output_path, assemble_from_lines((), state=state))
    return state


def run_first_pass(state: AssemblerState) -> None:
    """Record addresses of all labels, no output is produced."""
    assert state.stage == AssemblerStage.INITIAL
    state.stage = AssemblerStage.PASS1_SCANNING

    for instruction in parse_lines(state.lines, source=state.source):
        if instruction.type == InstructionType.LABEL:
            # Label refers to next instruction that occupies an address, so counter is not advanced
            state.symbols.insert_label(instruction.symbol())
            continue
        state.symbols.advance_instruction_address()

    state.stage = AssemblerStage.PASS1_DONE


def run_second_pass(state: AssemblerState) -> Generator[int]:
    """Translate each instruction into an word, resolving (and allocating) symbols."""
    assert state.stage == AssemblerStage.PASS1_DONE
    state.stage = AssemblerStage.PASS2_TRANSLATING

    for instruction in parse_lines(state.lines, source=state.source):
        word = translate_instruction(instruction, state.symbols)
        if word is None:
            continue
        state.words_emitted += 1
        yield word

    state.stage = AssemblerStage.COMPLETE


def translate_instruction(instruction: Instruction, symbols: SymbolTable) -> int | None:
    """Translate single instruction into an word or None if it does not occupy an address."""
    match instruction.type:
        case InstructionType.ADDRESS:
            return encode_address_instruction(_resolve_address(instruction, symbols))
        case InstructionType.COMPUTE:
            return encode_compute_instruction(
                instruction.dest(),
                instruction.comp(),
                instruction.jump(),
            )
        case InstructionType.LABEL:
            return None
        case _:
            assert_never(instruction.type)


def _resolve_address(instruction: Instruction, symbols: SymbolTable) -> int:
    if instruction.is_literal:
        return instruction.literal()

    name = instruction.symbol()
    if (address := symbols.get(name)) is not None:
        return address
    return symbols.insert_variable(name)
