from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.consts import MAX_ADDRESS_LITERAL
from hackasm.parser.errors import InvalidSyntaxError
from hackasm.parser.helpers import (
    ADDRESS_MARK,
    DEST_SEPARATOR,
    JUMP_SEPARATOR,
    LABEL_CLOSE_MARK,
    LABEL_OPEN_MARK,
    is_valid_comp,
    is_valid_decimal,
    is_valid_dest,
    is_valid_jump,
    is_valid_symbol,
    strip_comment,
)
from hackasm.parser.instructions import Instruction
from hackasm.parser.location import SourceLocation

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path


def parse_lines(
    lines: Iterable[str],
    *,
    source: Path | None = None,
) -> Generator[Instruction]:
    """Stream instructions parsed from given lines, lines without an instruction are skipped.

    :returns parser: Generator of instructions, in order from top to bottom of an source
    """
    for line_number, line in enumerate(lines, start=0):
        location = SourceLocation(line_number=line_number, filepath=source)
        if instruction := parse_line(line, location):
            yield instruction


def parse_line(line: str, location: SourceLocation) -> Instruction | None:
    """Classify an single raw line into an instruction.

    :returns instruction: Instruction or None if line is empty (e.g blank or comment only)
    """
    text = strip_comment(line)
    if not text:
        return None

    if text.startswith(ADDRESS_MARK):
        return _parse_address_instruction(text, location)

    if text.startswith(LABEL_OPEN_MARK) and text.endswith(LABEL_CLOSE_MARK):
        return _parse_label(text, location)

    return _parse_compute_instruction(text, location)


def _parse_address_instruction(text: str, location: SourceLocation) -> Instruction:
    payload = text.removeprefix(ADDRESS_MARK)

    if is_valid_decimal(payload):
        if _exceeds_address_literal(payload):
            raise InvalidSyntaxError(
                line=text,
                location=location,
                reason=f"Address literal does not fit into 15 bits (maximum is {MAX_ADDRESS_LITERAL}).",
            )
        return Instruction.address(text, location, symbol=payload)

    if not is_valid_symbol(payload):
        raise InvalidSyntaxError(
            line=text,
            location=location,
            reason="Address instruction expects an decimal literal or an symbol (letters, digits, `_.$:`, not starting with digit).",
        )
    return Instruction.address(text, location, symbol=payload)


def _parse_label(text: str, location: SourceLocation) -> Instruction:
    symbol = text[len(LABEL_OPEN_MARK) : -len(LABEL_CLOSE_MARK)]
    if not is_valid_symbol(symbol):
        raise InvalidSyntaxError(
            line=text,
            location=location,
            reason="Label expects an symbol (letters, digits, `_.$:`, not starting with digit).",
        )
    return Instruction.label(text, location, symbol=symbol)


def _parse_compute_instruction(text: str, location: SourceLocation) -> Instruction:
    """Parse one of the `dest=comp`, `comp;jump`, `dest=comp;jump` shapes."""
    has_dest = DEST_SEPARATOR in text
    has_jump = JUMP_SEPARATOR in text
    if not has_dest and not has_jump:
        raise InvalidSyntaxError(line=text, location=location)

    dest, comp, jump = None, text, None
    if has_dest:
        dest, _, comp = comp.partition(DEST_SEPARATOR)
    if has_jump:
        comp, _, jump = comp.partition(JUMP_SEPARATOR)

    if (
        (dest is not None and not is_valid_dest(dest))
        or not is_valid_comp(comp)
        or (jump is not None and not is_valid_jump(jump))
    ):
        raise InvalidSyntaxError(line=text, location=location)

    return Instruction.compute(text, location, dest=dest, comp=comp, jump=jump)


def _exceeds_address_literal(payload: str) -> bool:
    # Length is checked first so huge literals never reach `int()`
    digits = payload.lstrip("0")
    max_digits = len(str(MAX_ADDRESS_LITERAL))
    return len(digits) > max_digits or (len(digits) == max_digits and int(digits) > MAX_ADDRESS_LITERAL)
