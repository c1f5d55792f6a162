from hackasm.exceptions import HackAssemblerError
from hackasm.parser.location import SourceLocation


class InvalidSyntaxError(HackAssemblerError):
    def __init__(
        self,
        *args: object,
        line: str,
        location: SourceLocation,
        reason: str | None = None,
    ) -> None:
        super().__init__(*args)
        self.line = line
        self.location = location
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Invalid syntax at {self.location}!

`{self.line}`
{self.reason or "Line is not an address instruction, label or compute instruction (dest=comp, comp;jump, dest=comp;jump)."}

{self.generic_error_name}"""
