from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.exceptions import HackAssemblerError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hackasm.parser.instructions import Instruction, InstructionType


class InvalidInstructionTypeError(HackAssemblerError):
    def __init__(
        self,
        *args: object,
        instruction: Instruction,
        accessor: str,
        expected_types: Iterable[InstructionType],
    ) -> None:
        super().__init__(*args)
        self.instruction = instruction
        self.accessor = accessor
        self.expected_types = expected_types

    def __repr__(self) -> str:
        expected = ", ".join(t.name for t in self.expected_types)
        return f"""Cannot take `{self.accessor}` of {self.instruction.type.name} instruction `{self.instruction.text}` at {self.instruction.location}!

Expected instruction of type: {expected}
Probably this is not an language user fault.

{self.generic_error_name}"""
