from hackasm.exceptions import HackAssemblerError


class AddressSpaceExhaustedError(HackAssemblerError):
    def __init__(self, *args: object, name: str, limit: int) -> None:
        super().__init__(*args)
        self.name = name
        self.limit = limit

    def __repr__(self) -> str:
        return f"""Cannot allocate variable '{self.name}', there are no more free RAM addresses!

Variables may only occupy addresses up to {self.limit}.

{self.generic_error_name}"""
