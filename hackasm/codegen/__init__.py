"""Binary code generation for Hack instructions (mnemonic tables and word encoding)."""

from .encoder import (
    decode_compute_instruction,
    encode_address_instruction,
    encode_compute_instruction,
    format_instruction_word,
)
from .mnemonics import comp, dest, jump

__all__ = [
    "comp",
    "decode_compute_instruction",
    "dest",
    "encode_address_instruction",
    "encode_compute_instruction",
    "format_instruction_word",
    "jump",
]
