"""
Lox Tokens
==========

Token types and the immutable Token value produced by the scanner.

Only three token types carry a literal payload:

| Type       | Literal                               |
|------------|---------------------------------------|
| IDENTIFIER | the identifier text (str)             |
| STRING     | text between the quotes (str)         |
| NUMBER     | parsed value (float)                  |

Every other token has ``literal=None``. The Token constructor checks
this, so a token whose payload disagrees with its type cannot exist.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Lexical categories of the Lox language.

    Keywords get their own types so the parser never has to compare
    identifier text.
    """

    # === Single-character tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or two character tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Structural ===
    EOF = auto()


LITERAL_TYPES = frozenset({
    TokenType.IDENTIFIER,
    TokenType.STRING,
    TokenType.NUMBER,
})

KEYWORD_TYPES = frozenset({
    TokenType.AND,
    TokenType.CLASS,
    TokenType.ELSE,
    TokenType.FALSE,
    TokenType.FUN,
    TokenType.FOR,
    TokenType.IF,
    TokenType.NIL,
    TokenType.OR,
    TokenType.PRINT,
    TokenType.RETURN,
    TokenType.SUPER,
    TokenType.THIS,
    TokenType.TRUE,
    TokenType.VAR,
    TokenType.WHILE,
})

Literal = Union[str, float]


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token of Lox source.

    Attributes:
        type: The TokenType classification
        lexeme: Exact source text of the token ("" for EOF)
        line: Line of the token's first character (1-indexed)
        literal: Payload for IDENTIFIER, STRING and NUMBER, else None
    """
    type: TokenType
    lexeme: str
    line: int
    literal: Optional[Literal] = None

    def __post_init__(self) -> None:
        if self.type in LITERAL_TYPES:
            if self.literal is None:
                raise ValueError(f"{self.type.name} token requires a literal")
            expected = float if self.type is TokenType.NUMBER else str
            if not isinstance(self.literal, expected):
                raise ValueError(
                    f"{self.type.name} literal must be {expected.__name__}, "
                    f"got {type(self.literal).__name__}"
                )
        elif self.literal is not None:
            raise ValueError(f"{self.type.name} token cannot carry a literal")

        if self.type is not TokenType.EOF and not self.lexeme:
            raise ValueError(f"{self.type.name} token requires a lexeme")

    def __str__(self) -> str:
        """Format as 'TYPE lexeme literal', omitting empty parts."""
        parts = [self.type.name]
        if self.lexeme:
            parts.append(self.lexeme)
        if self.literal is not None:
            parts.append(str(self.literal))
        return " ".join(parts)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    def is_literal(self) -> bool:
        """Return True if this token carries a literal payload."""
        return self.type in LITERAL_TYPES
