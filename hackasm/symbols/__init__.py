from .table import SymbolTable

__all__ = ["SymbolTable"]
