from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of an instruction within source lines."""

    line_number: int

    # None if lines does not come from an file (e.g given directly in-memory)
    filepath: Path | None = None

    def __repr__(self) -> str:
        if self.filepath is None:
            return f"'(source-lines):{self.line_number + 1}'"
        return f"'{self.filepath.name}:{self.line_number + 1}'"
