from hackasm.exceptions import HackAssemblerError


class SymbolExistsError(HackAssemblerError):
    def __init__(self, *args: object, name: str, address: int) -> None:
        super().__init__(*args)
        self.name = name
        self.address = address

    def __repr__(self) -> str:
        return f"""Symbol '{self.name}' is already defined (at address {self.address})!

Symbols (labels, variables and predefined ones) cannot be redefined.
Did you declare same label twice?

{self.generic_error_name}"""
