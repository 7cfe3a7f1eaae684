"""
Lox Scanner
===========

This module implements the scanner (lexer) for Lox. It converts source
text into a stream of tokens for a parser.

Token Categories
----------------
- Punctuation: ( ) { } , . - + ; * /
- Operators: ! != = == < <= > >=
- Strings: "double quoted", may span lines, no escape sequences
- Numbers: 123 and 123.45 (always parsed as float)
- Identifiers and keywords: and, class, else, false, for, fun, if, nil,
  or, print, return, super, this, true, var, while

Comments
--------
- Single-line: // comment

Error Recovery
--------------
Malformed input never stops the scan. An unexpected character is
reported and skipped; an unterminated string is reported and the scan
ends at end of input. Errors go to the ErrorReporter given to the
Scanner; the caller decides whether they are fatal.

Example Usage
-------------
>>> from pylox.scanner import Scanner
>>> for token in Scanner("var x = 10;").tokens():
...     print(token)
VAR var
IDENTIFIER x x
EQUAL =
NUMBER 10 10.0
SEMICOLON ;
EOF
"""

import logging
import string
from typing import Iterator, List, Optional, Union

from pylox.errors import (
    ErrorCollector,
    ErrorReporter,
    ScanError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from pylox.scanner.keywords import DEFAULT_KEYWORDS, KeywordTable
from pylox.scanner.token import Token, TokenType

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

# ASCII only: str.isdigit()/isalpha() would accept Unicode digits and letters
DIGITS = frozenset(string.digits)
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_CHARS = IDENT_START | DIGITS

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# char -> (type when followed by '=', type otherwise)
EQUAL_SUFFIX_TOKENS = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

WHITESPACE = frozenset(" \t\r")


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    A Scanner is created for one source unit and consumed once. It keeps
    a reference to the source, never a copy, and owns only its cursor:

    - ``start``: offset of the first character of the token being scanned
    - ``current``: offset of the next unread character
    - ``line``: current line number, bumped once per newline consumed

    Usage:
        scanner = Scanner(source_text)
        tokens = scanner.scan_tokens()
        if scanner.reporter.has_errors():
            ...

    Attributes:
        source: The text being scanned
        reporter: Where lexical errors are sent
        keywords: Table used to turn identifiers into reserved words
        errors: Every ScanError reported so far, in order
    """

    def __init__(
        self,
        source: Union[str, bytes],
        reporter: Optional[ErrorReporter] = None,
        keywords: KeywordTable = DEFAULT_KEYWORDS,
    ):
        """
        Initialize the scanner.

        Args:
            source: Lox source text. Bytes are decoded as Latin-1 so that
                every byte is scanned as exactly one character.
            reporter: Error sink. Defaults to a fresh ErrorCollector.
            keywords: Reserved word table
        """
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("latin-1")

        self.source = source
        self.reporter = reporter if reporter is not None else ErrorCollector()
        self.keywords = keywords
        self.errors: List[ScanError] = []

        self.start = 0
        self.current = 0
        self.line = 1

        # Offset where the current line begins, for error context
        self._line_start = 0

    # =========================================================================
    # Token Stream
    # =========================================================================

    def tokens(self) -> Iterator[Token]:
        """
        Generate tokens lazily from the source.

        Yields:
            Each recognized Token, then exactly one EOF token
        """
        count = 0
        while not self.is_at_end():
            token = self.scan_token()
            if token is not None:
                count += 1
                yield token

        logger.debug(
            "scanned %d tokens over %d lines with %d errors",
            count, self.line, len(self.errors),
        )
        yield Token(TokenType.EOF, "", self.line)

    def scan_tokens(self) -> List[Token]:
        """Scan the whole source and return the tokens as a list."""
        return list(self.tokens())

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def scan_token(self) -> Optional[Token]:
        """
        Scan one lexical element starting at the cursor.

        Always consumes at least one character.

        Returns:
            The recognized Token, or None for whitespace, comments and
            reported errors
        """
        self.start = self.current
        char = self.advance()

        if char in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[char])

        if char in EQUAL_SUFFIX_TOKENS:
            compound, simple = EQUAL_SUFFIX_TOKENS[char]
            return self._make_token(compound if self.match_next("=") else simple)

        if char == "/":
            if self.match_next("/"):
                self._skip_line_comment()
                return None
            return self._make_token(TokenType.SLASH)

        if char in WHITESPACE:
            return None

        if char == "\n":
            self._newline()
            return None

        if char == '"':
            return self._scan_string()

        if char in DIGITS:
            return self._scan_number()

        if char in IDENT_START:
            return self._scan_identifier()

        self._report(UnexpectedCharacterError(char, self.line, self._current_line_text()))
        return None

    # =========================================================================
    # Cursor Primitives
    # =========================================================================

    def is_at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self.current >= len(self.source)

    def advance(self) -> str:
        """
        Consume and return the current character.

        Callers must check is_at_end() first; reading past the end raises
        IndexError.
        """
        char = self.source[self.current]
        self.current += 1
        return char

    def peek(self) -> str:
        """Return the next unread character, or "" at end of input."""
        if self.is_at_end():
            return ""
        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the character after the next one, or "" if out of range."""
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def match_next(self, expected: str) -> bool:
        """
        Consume the next character only if it equals expected.

        Returns:
            True if matched and consumed, False otherwise (no state change)
        """
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    # =========================================================================
    # Literal Sub-Scanners
    # =========================================================================

    def _skip_line_comment(self) -> None:
        """Skip to the end of the line; the newline itself is left unread."""
        while self.peek() != "\n" and not self.is_at_end():
            self.advance()

    def _scan_string(self) -> Optional[Token]:
        """
        Scan a double-quoted string literal.

        Strings may span lines. The token is stamped with the line of the
        opening quote.
        """
        start_line = self.line
        start_line_text = self._current_line_text()

        while self.peek() != '"' and not self.is_at_end():
            if self.advance() == "\n":
                self._newline()

        if self.is_at_end():
            self._report(UnterminatedStringError(start_line, start_line_text))
            return None

        self.advance()  # closing "

        value = self.source[self.start + 1:self.current - 1]
        return self._make_token(TokenType.STRING, value, line=start_line)

    def _scan_number(self) -> Token:
        """
        Scan a number literal: digits, optionally '.' and more digits.

        A '.' not followed by a digit is not part of the number, so
        ``10.`` scans as NUMBER then DOT.
        """
        while self.peek() in DIGITS:
            self.advance()

        if self.peek() == "." and self.peek_next() in DIGITS:
            self.advance()  # the '.'
            while self.peek() in DIGITS:
                self.advance()

        lexeme = self.source[self.start:self.current]
        return self._make_token(TokenType.NUMBER, float(lexeme))

    def _scan_identifier(self) -> Token:
        """Scan an identifier, then check it against the keyword table."""
        while self.peek() in IDENT_CHARS:
            self.advance()

        text = self.source[self.start:self.current]
        keyword = self.keywords.lookup(text)
        if keyword is not None:
            return self._make_token(keyword)
        return self._make_token(TokenType.IDENTIFIER, text)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        literal: Union[str, float, None] = None,
        line: Optional[int] = None,
    ) -> Token:
        """Build a token covering source[start:current]."""
        return Token(
            type=token_type,
            lexeme=self.source[self.start:self.current],
            line=self.line if line is None else line,
            literal=literal,
        )

    def _newline(self) -> None:
        self.line += 1
        self._line_start = self.current

    def _report(self, error: ScanError) -> None:
        """Record a lexical error and pass it to the reporter."""
        logger.debug("scan error: %s", error.message)
        self.errors.append(error)
        self.reporter.report(error.line, error.message)

    def _current_line_text(self) -> str:
        """Get the text of the line the cursor is on, for error context."""
        line_end = self.source.find("\n", self._line_start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start:line_end]


def scan(
    source: Union[str, bytes],
    reporter: Optional[ErrorReporter] = None,
    keywords: KeywordTable = DEFAULT_KEYWORDS,
) -> List[Token]:
    """
    Scan source text in one call.

    Args:
        source: Lox source text
        reporter: Error sink (defaults to a throwaway ErrorCollector)
        keywords: Reserved word table

    Returns:
        All tokens, ending with EOF
    """
    return Scanner(source, reporter, keywords).scan_tokens()
