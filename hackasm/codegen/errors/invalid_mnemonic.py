from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from hackasm.exceptions import HackAssemblerError

if TYPE_CHECKING:
    from collections.abc import Iterable


class InvalidMnemonicError(HackAssemblerError):
    def __init__(
        self,
        *args: object,
        field: Literal["dest", "comp", "jump"],
        mnemonic: str | int,
        mnemonics_available: Iterable[str],
    ) -> None:
        super().__init__(*args)
        self.field = field
        self.mnemonic = mnemonic
        self.mnemonics_available = mnemonics_available

    def __repr__(self) -> str:
        mnemonic = (
            f"0b{self.mnemonic:b}"
            if isinstance(self.mnemonic, int)
            else f"'{self.mnemonic}'"
        )
        return f"""Invalid '{self.field}' mnemonic {mnemonic}!

Expected one of: {", ".join(self.mnemonics_available)}

{self.generic_error_name}"""
