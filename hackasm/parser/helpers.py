"""Character class predicates used to classify source lines."""

from __future__ import annotations

from string import ascii_letters, digits

COMMENT_MARK = "//"

ADDRESS_MARK = "@"
LABEL_OPEN_MARK = "("
LABEL_CLOSE_MARK = ")"

DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"

SYMBOL_CHARACTERS = frozenset(ascii_letters + digits + "_.$:")
DECIMAL_CHARACTERS = frozenset(digits)

DEST_CHARACTERS = frozenset(ascii_letters)
COMP_CHARACTERS = frozenset(ascii_letters + "01-!+&|")
JUMP_CHARACTERS = frozenset(ascii_letters)


def strip_comment(line: str) -> str:
    """Remove trailing comment (if any) and surrounding whitespace from an line."""
    comment_starts_at = line.find(COMMENT_MARK)
    if comment_starts_at != -1:
        line = line[:comment_starts_at]
    return line.strip()


def is_valid_symbol(text: str) -> bool:
    return (
        bool(text)
        and text[0] not in DECIMAL_CHARACTERS
        and _consists_of(text, SYMBOL_CHARACTERS)
    )


def is_valid_decimal(text: str) -> bool:
    return bool(text) and _consists_of(text, DECIMAL_CHARACTERS)


def is_valid_dest(text: str) -> bool:
    return bool(text) and _consists_of(text, DEST_CHARACTERS)


def is_valid_comp(text: str) -> bool:
    return bool(text) and _consists_of(text, COMP_CHARACTERS)


def is_valid_jump(text: str) -> bool:
    return bool(text) and _consists_of(text, JUMP_CHARACTERS)


def _consists_of(text: str, alphabet: frozenset[str]) -> bool:
    return all(c in alphabet for c in text)
