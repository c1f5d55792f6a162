import re
from abc import abstractmethod

# Boundary before every inner capital letter, e.g `InvalidSyntaxError` -> `invalid-syntax-error`
_TAG_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class HackAssemblerError(Exception):
    """Parent for all assembler errors.

    Children render an user-facing message in `__repr__` which ends with the error tag,
    that message is what CLI displays and what `str()` gives.
    """

    # Tag of an error class, e.g `[symbol-exists-error]`, set for each subclass
    generic_error_name: str = "[hack-assembler-error]"

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls.generic_error_name = f"[{_TAG_WORD_BOUNDARY.sub('-', cls.__name__).lower()}]"

    @abstractmethod
    def __repr__(self) -> str:
        return f"Assembler internal error {self.__class__.__name__}{self.args}, that is not documented"

    def __str__(self) -> str:
        return repr(self)
