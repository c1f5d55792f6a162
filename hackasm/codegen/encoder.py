from __future__ import annotations

from hackasm.codegen.mnemonics import (
    NULL_MNEMONIC,
    comp,
    comp_mnemonic,
    dest,
    dest_mnemonic,
    jump,
    jump_mnemonic,
)
from hackasm.consts import INSTRUCTION_WORD_WIDTH, MAX_ADDRESS_LITERAL

# Fixed prefix of every compute instruction (bits 15-13)
COMPUTE_OPCODE = 0b111

COMPUTE_OPCODE_SHIFT = 13
COMP_FIELD_SHIFT = 6
DEST_FIELD_SHIFT = 3
JUMP_FIELD_SHIFT = 0

COMP_FIELD_MASK = 0b111_1111
DEST_FIELD_MASK = 0b111
JUMP_FIELD_MASK = 0b111


def encode_address_instruction(value: int) -> int:
    """Encode address instruction that loads given value, bit 15 is left zero."""
    assert 0 <= value <= MAX_ADDRESS_LITERAL, f"Address value {value} does not fit into 15 bits"
    return value


def encode_compute_instruction(
    dest_text: str | None,
    comp_text: str,
    jump_text: str | None,
) -> int:
    """Encode compute instruction from its mnemonics, omitted dest or jump are encoded as zero bits."""
    return (
        (COMPUTE_OPCODE << COMPUTE_OPCODE_SHIFT)
        | (comp(comp_text) << COMP_FIELD_SHIFT)
        | (dest(dest_text or NULL_MNEMONIC) << DEST_FIELD_SHIFT)
        | (jump(jump_text or NULL_MNEMONIC) << JUMP_FIELD_SHIFT)
    )


def decode_compute_instruction(word: int) -> tuple[str, str, str]:
    """Decode compute instruction word back into its (dest, comp, jump) mnemonics.

    Omitted fields are decoded as `null` mnemonic.
    """
    assert is_compute_instruction(word), f"Word {word:#018b} is not an compute instruction"
    return (
        dest_mnemonic((word >> DEST_FIELD_SHIFT) & DEST_FIELD_MASK),
        comp_mnemonic((word >> COMP_FIELD_SHIFT) & COMP_FIELD_MASK),
        jump_mnemonic((word >> JUMP_FIELD_SHIFT) & JUMP_FIELD_MASK),
    )


def is_compute_instruction(word: int) -> bool:
    return word >> COMPUTE_OPCODE_SHIFT == COMPUTE_OPCODE


def format_instruction_word(word: int) -> str:
    """Format instruction word as big-endian binary text without any prefix."""
    return format(word, f"0{INSTRUCTION_WORD_WIDTH}b")
