from .address_space_exhausted import AddressSpaceExhaustedError
from .symbol_exists import SymbolExistsError

__all__ = ["AddressSpaceExhaustedError", "SymbolExistsError"]
