from pathlib import Path

from hackasm.consts import OUTPUT_FILE_SUFFIX, SOURCE_FILE_SUFFIX
from hackasm.exceptions import HackAssemblerError


class InvalidInputFileExtensionError(HackAssemblerError):
    def __init__(self, *args: object, path: Path) -> None:
        super().__init__(*args)
        self.path = path

    def __repr__(self) -> str:
        return f"""invalid input file extension, only '{SOURCE_FILE_SUFFIX}' accepted

Got `{self.path}`

{self.generic_error_name}"""


class InvalidOutputFileExtensionError(HackAssemblerError):
    def __init__(self, *args: object, path: Path) -> None:
        super().__init__(*args)
        self.path = path

    def __repr__(self) -> str:
        return f"""invalid output file extension, only '{OUTPUT_FILE_SUFFIX}' accepted

Got `{self.path}`

{self.generic_error_name}"""
