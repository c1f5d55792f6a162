from .invalid_mnemonic import InvalidMnemonicError

__all__ = ["InvalidMnemonicError"]
