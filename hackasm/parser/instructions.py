from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from hackasm.parser.errors import InvalidInstructionTypeError
from hackasm.parser.helpers import is_valid_decimal

if TYPE_CHECKING:
    from hackasm.parser.location import SourceLocation


class InstructionType(IntEnum):
    """Type of an instruction parsed from an single line.

    Closed set, there is never anything besides these three shapes.
    """

    # @value or @symbol
    ADDRESS = auto()

    # dest=comp;jump (with either dest or jump omitted)
    COMPUTE = auto()

    # (symbol), pseudo-instruction which does not occupy an instruction address
    LABEL = auto()


@dataclass(frozen=True, slots=True)
class Instruction:
    """Instruction parsed from an source line.

    Fields are filled depending on type, accessors must be used to read them
    as they validate that instruction is of an matching type.
    """

    type: InstructionType

    # Normalized text of an instruction (without comment and whitespace)
    text: str

    # Location within source lines
    location: SourceLocation

    # Symbol or decimal literal text for address instruction, symbol for label
    _symbol: str | None = None

    # Parts of an compute instruction
    _dest: str | None = None
    _comp: str | None = None
    _jump: str | None = None

    @property
    def occupies_address(self) -> bool:
        """Is that instruction emits an word into program memory (e.g not an label)."""
        return self.type != InstructionType.LABEL

    @property
    def is_literal(self) -> bool:
        """Is that address instruction loads an decimal literal instead of an symbol."""
        return is_valid_decimal(self.symbol())

    def literal(self) -> int:
        """Get decimal literal value of an address instruction."""
        symbol = self.symbol()
        assert is_valid_decimal(symbol), f"Address instruction `{self.text}` does not load an literal"
        # Leading zeros are dropped as they are not bounded by parser
        return int(symbol.lstrip("0") or "0")

    def symbol(self) -> str:
        """Get symbol (or decimal literal) text of an address instruction or label."""
        self._expect_type("symbol", InstructionType.ADDRESS, InstructionType.LABEL)
        assert self._symbol is not None
        return self._symbol

    def dest(self) -> str | None:
        """Get `dest` mnemonic of an compute instruction, None if omitted."""
        self._expect_type("dest", InstructionType.COMPUTE)
        return self._dest

    def comp(self) -> str:
        """Get `comp` mnemonic of an compute instruction."""
        self._expect_type("comp", InstructionType.COMPUTE)
        assert self._comp is not None
        return self._comp

    def jump(self) -> str | None:
        """Get `jump` mnemonic of an compute instruction, None if omitted."""
        self._expect_type("jump", InstructionType.COMPUTE)
        return self._jump

    def _expect_type(self, accessor: str, *expected_types: InstructionType) -> None:
        if self.type not in expected_types:
            raise InvalidInstructionTypeError(
                instruction=self,
                accessor=accessor,
                expected_types=expected_types,
            )

    @classmethod
    def address(cls, text: str, location: SourceLocation, *, symbol: str) -> Instruction:
        return cls(
            type=InstructionType.ADDRESS,
            text=text,
            location=location,
            _symbol=symbol,
        )

    @classmethod
    def label(cls, text: str, location: SourceLocation, *, symbol: str) -> Instruction:
        return cls(
            type=InstructionType.LABEL,
            text=text,
            location=location,
            _symbol=symbol,
        )

    @classmethod
    def compute(
        cls,
        text: str,
        location: SourceLocation,
        *,
        dest: str | None,
        comp: str,
        jump: str | None,
    ) -> Instruction:
        return cls(
            type=InstructionType.COMPUTE,
            text=text,
            location=location,
            _dest=dest,
            _comp=comp,
            _jump=jump,
        )
