from .invalid_instruction_type import InvalidInstructionTypeError
from .invalid_syntax import InvalidSyntaxError

__all__ = ["InvalidInstructionTypeError", "InvalidSyntaxError"]
