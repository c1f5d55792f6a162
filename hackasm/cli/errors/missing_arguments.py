from hackasm.exceptions import HackAssemblerError


class MissingArgumentsError(HackAssemblerError):
    def __repr__(self) -> str:
        return f"""input and output filenames were not provided

Expected usage: `<input>.asm <output>.hack`

{self.generic_error_name}"""


class MissingOutputFilenameError(HackAssemblerError):
    def __repr__(self) -> str:
        return f"""output filename not provided

Expected usage: `<input>.asm <output>.hack`

{self.generic_error_name}"""
