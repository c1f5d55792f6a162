"""Mnemonic tables for fields of an compute instruction.

Each lookup returns raw (unshifted) field bits, placing them into an instruction word is up to the encoder.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from hackasm.codegen.errors import InvalidMnemonicError

# Mnemonic for an omitted `dest` or `jump` field
NULL_MNEMONIC = "null"

DEST_MNEMONICS: Mapping[str, int] = MappingProxyType(
    {
        NULL_MNEMONIC: 0b000,
        "M": 0b001,
        "D": 0b010,
        "MD": 0b011,
        "A": 0b100,
        "AM": 0b101,
        "AD": 0b110,
        "AMD": 0b111,
    },
)

JUMP_MNEMONICS: Mapping[str, int] = MappingProxyType(
    {
        NULL_MNEMONIC: 0b000,
        "JGT": 0b001,
        "JEQ": 0b010,
        "JGE": 0b011,
        "JLT": 0b100,
        "JNE": 0b101,
        "JLE": 0b110,
        "JMP": 0b111,
    },
)

# Leading bit is the `a` selector (A register or M memory operand), rest six are ALU control bits (zx nx zy ny f no)
COMP_MNEMONICS: Mapping[str, int] = MappingProxyType(
    {
        # a = 0
        "0": 0b0101010,
        "1": 0b0111111,
        "-1": 0b0111010,
        "D": 0b0001100,
        "A": 0b0110000,
        "!D": 0b0001101,
        "!A": 0b0110001,
        "-D": 0b0001111,
        "-A": 0b0110011,
        "D+1": 0b0011111,
        "A+1": 0b0110111,
        "D-1": 0b0001110,
        "A-1": 0b0110010,
        "D+A": 0b0000010,
        "D-A": 0b0010011,
        "A-D": 0b0000111,
        "D&A": 0b0000000,
        "D|A": 0b0010101,
        # a = 1
        "M": 0b1110000,
        "!M": 0b1110001,
        "-M": 0b1110011,
        "M+1": 0b1110111,
        "M-1": 0b1110010,
        "D+M": 0b1000010,
        "D-M": 0b1010011,
        "M-D": 0b1000111,
        "D&M": 0b1000000,
        "D|M": 0b1010101,
    },
)

_FIELD_TABLES: Mapping[Literal["dest", "comp", "jump"], Mapping[str, int]] = {
    "dest": DEST_MNEMONICS,
    "comp": COMP_MNEMONICS,
    "jump": JUMP_MNEMONICS,
}


def dest(mnemonic: str) -> int:
    """Translate `dest` mnemonic into its 3-bit field."""
    return _lookup_field_bits("dest", mnemonic)


def comp(mnemonic: str) -> int:
    """Translate `comp` mnemonic into its 7-bit field (`a` selector and ALU control bits)."""
    return _lookup_field_bits("comp", mnemonic)


def jump(mnemonic: str) -> int:
    """Translate `jump` mnemonic into its 3-bit field."""
    return _lookup_field_bits("jump", mnemonic)


def dest_mnemonic(bits: int) -> str:
    return _lookup_field_mnemonic("dest", bits)


def comp_mnemonic(bits: int) -> str:
    return _lookup_field_mnemonic("comp", bits)


def jump_mnemonic(bits: int) -> str:
    return _lookup_field_mnemonic("jump", bits)


def _lookup_field_bits(field: Literal["dest", "comp", "jump"], mnemonic: str) -> int:
    table = _FIELD_TABLES[field]
    if (bits := table.get(mnemonic)) is None:
        raise InvalidMnemonicError(
            field=field,
            mnemonic=mnemonic,
            mnemonics_available=table.keys(),
        )
    return bits


def _lookup_field_mnemonic(field: Literal["dest", "comp", "jump"], bits: int) -> str:
    """Reverse lookup of an field, first mnemonic wins as tables have no duplicate bit patterns."""
    table = _FIELD_TABLES[field]
    for mnemonic, mnemonic_bits in table.items():
        if mnemonic_bits == bits:
            return mnemonic
    raise InvalidMnemonicError(
        field=field,
        mnemonic=bits,
        mnemonics_available=table.keys(),
    )
