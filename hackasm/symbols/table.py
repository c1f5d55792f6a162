from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.consts import VARIABLE_ADDRESS_LIMIT, VARIABLE_BASE_ADDRESS
from hackasm.symbols.errors import AddressSpaceExhaustedError, SymbolExistsError
from hackasm.symbols.predefined import PREDEFINED_SYMBOLS

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


class SymbolTable:
    """Mapping of symbols (predefined, labels and variables) to their addresses.

    Labels live in instruction memory (ROM) and variables in data memory (RAM),
    both share same names namespace so no name may be defined twice.
    """

    _symbols: dict[str, int]

    # Names in order of their definition, for listing
    _labels: list[str]
    _variables: list[str]

    # Address of next instruction that occupies program memory (used for labels)
    _instruction_address: int

    # Next free RAM address for an variable
    _variable_address: int

    def __init__(self) -> None:
        self._symbols = dict(PREDEFINED_SYMBOLS)
        self._labels = []
        self._variables = []
        self._instruction_address = 0
        self._variable_address = VARIABLE_BASE_ADDRESS

    def get(self, name: str) -> int | None:
        """Get address of an symbol or None if it is not defined."""
        return self._symbols.get(name)

    def insert_label(self, name: str) -> int:
        """Define label at current instruction address."""
        address = self._instruction_address
        self._insert(name, address)
        self._labels.append(name)
        return address

    def insert_variable(self, name: str) -> int:
        """Define variable at next free RAM address."""
        address = self._variable_address
        if address > VARIABLE_ADDRESS_LIMIT:
            raise AddressSpaceExhaustedError(name=name, limit=VARIABLE_ADDRESS_LIMIT)
        self._insert(name, address)
        self._variables.append(name)
        self._variable_address += 1
        return address

    def advance_instruction_address(self) -> None:
        """Move to next instruction address, only for instructions that occupy program memory."""
        self._instruction_address += 1

    @property
    def instruction_address(self) -> int:
        return self._instruction_address

    @property
    def next_variable_address(self) -> int:
        return self._variable_address

    def labels(self) -> Mapping[str, int]:
        return {name: self._symbols[name] for name in self._labels}

    def variables(self) -> Mapping[str, int]:
        return {name: self._symbols[name] for name in self._variables}

    def _insert(self, name: str, address: int) -> None:
        if (defined_at := self._symbols.get(name)) is not None:
            raise SymbolExistsError(name=name, address=defined_at)
        self._symbols[name] = address

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)
