"""Line source and instruction sink backed by files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.codegen.encoder import format_instruction_word
from hackasm.exceptions import HackAssemblerError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path


class SourceFileReadError(HackAssemblerError):
    def __init__(
        self,
        *args: object,
        path: Path,
        reason: OSError | UnicodeDecodeError,
    ) -> None:
        super().__init__(*args)
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        if isinstance(self.reason, UnicodeDecodeError):
            details = f"Source file must be UTF-8 encoded text ({self.reason})"
        else:
            details = self.reason.strerror or str(self.reason)
        return f"""Unable to read source file `{self.path}`!

{details}

{self.generic_error_name}"""


class OutputFileWriteError(HackAssemblerError):
    def __init__(self, *args: object, path: Path, reason: OSError) -> None:
        super().__init__(*args)
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to write output file `{self.path}`!

{self.reason.strerror or self.reason}

{self.generic_error_name}"""


def read_source_file_lines(path: Path) -> Sequence[str]:
    """Read whole source file into memory, so it can be iterated for each assembler pass."""
    try:
        with path.open(encoding="utf-8") as fd:
            # Split on line breaks only, form feeds and other separators stay within a line
            return [line.rstrip("\r\n") for line in fd]
    except (OSError, UnicodeDecodeError) as e:
        raise SourceFileReadError(path=path, reason=e) from e


def write_instruction_words(path: Path, words: Iterable[int]) -> int:
    """Write each instruction word as an binary text line, flushing after every word.

    Words are consumed lazily so if producing next word fails everything before it is already written.
    :returns count: Amount of words written
    """
    count = 0
    try:
        with path.open("w", encoding="utf-8", newline="\n") as fd:
            for word in words:
                fd.write(format_instruction_word(word) + "\n")
                fd.flush()
                count += 1
    except OSError as e:
        raise OutputFileWriteError(path=path, reason=e) from e
    return count
