from collections.abc import Mapping
from types import MappingProxyType

from hackasm.consts import (
    GENERAL_PURPOSE_REGISTERS_COUNT,
    KEYBOARD_ADDRESS,
    SCREEN_ADDRESS,
)

PREDEFINED_SYMBOLS: Mapping[str, int] = MappingProxyType(
    {
        **{f"R{i}": i for i in range(GENERAL_PURPOSE_REGISTERS_COUNT)},
        # Aliases for virtual machine stack and segment pointers
        "SP": 0,
        "LCL": 1,
        "ARG": 2,
        "THIS": 3,
        "THAT": 4,
        "SCREEN": SCREEN_ADDRESS,
        "KBD": KEYBOARD_ADDRESS,
    },
)
