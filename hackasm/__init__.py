"""Hack assembler.

Translates Hack assembly (`.asm`) into Hack machine code (`.hack`).
Provides toolchain including CLI and core two-pass assembler.
"""

from .assembler import assemble_file, assemble_from_lines

__all__ = [
    "assemble_file",
    "assemble_from_lines",
]
