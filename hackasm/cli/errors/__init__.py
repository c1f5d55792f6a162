from .invalid_file_extension import (
    InvalidInputFileExtensionError,
    InvalidOutputFileExtensionError,
)
from .missing_arguments import MissingArgumentsError, MissingOutputFilenameError

__all__ = [
    "InvalidInputFileExtensionError",
    "InvalidOutputFileExtensionError",
    "MissingArgumentsError",
    "MissingOutputFilenameError",
]
