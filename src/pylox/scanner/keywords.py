"""
Keyword Table
=============

Read-only mapping from reserved-word spelling to its TokenType.

The scanner never produces a keyword token directly. It scans an
identifier first and then looks the finished text up here, so that
``classify`` stays one identifier instead of ``class`` + ``ify``.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from pylox.scanner.token import KEYWORD_TYPES, TokenType


class KeywordTable:
    """
    Immutable lookup from exact identifier text to a reserved TokenType.

    The entries are copied into a MappingProxyType at construction, so
    neither the caller's dict nor the table can change afterwards. One
    instance may be shared by any number of scanners.

    Example:
        >>> DEFAULT_KEYWORDS.lookup("while") is TokenType.WHILE
        True
        >>> DEFAULT_KEYWORDS.lookup("whilst") is None
        True
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, TokenType]):
        for text, token_type in entries.items():
            if token_type not in KEYWORD_TYPES:
                raise ValueError(
                    f"'{text}' maps to {token_type.name}, which is not a keyword type"
                )
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, text: str) -> Optional[TokenType]:
        """Return the reserved type for text, or None if it is not a keyword."""
        return self._entries.get(text)

    def __getitem__(self, text: str) -> TokenType:
        return self._entries[text]

    def __contains__(self, text: object) -> bool:
        return text in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KeywordTable({len(self._entries)} entries)"


# Built once at import time and shared by every scan
DEFAULT_KEYWORDS = KeywordTable({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})
