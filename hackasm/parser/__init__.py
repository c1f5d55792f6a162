"""Parser (line classifier) that turns raw source lines into instructions."""

from .instructions import Instruction, InstructionType
from .location import SourceLocation
from .parser import parse_line, parse_lines

__all__ = [
    "Instruction",
    "InstructionType",
    "SourceLocation",
    "parse_line",
    "parse_lines",
]
