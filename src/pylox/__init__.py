"""
pylox - A Scanner for the Lox Scripting Language
================================================

This package turns Lox source text into a stream of typed tokens, ready
for a parser. Lexical errors are reported, not raised, so one pass finds
every problem in the input.

Main Components
---------------
- **scanner**: Token types, keyword table and the Scanner itself
- **errors**: Error hierarchy and error reporters
- **config**: Settings for the command-line tool
- **cli**: The ``loxscan`` command (file mode and interactive prompt)

Quick Start
-----------
    >>> from pylox import Scanner, ErrorCollector
    >>> collector = ErrorCollector()
    >>> tokens = Scanner("var x = 10;", collector).scan_tokens()
    >>> [str(t) for t in tokens][:2]
    ['VAR var', 'IDENTIFIER x x']
    >>> collector.has_errors()
    False

Or from the terminal:
    $ loxscan hello.lox
    $ loxscan            # interactive prompt
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pylox.errors import (
    Diagnostic,
    ErrorCollector,
    ErrorReporter,
    LoxError,
    ScanError,
    ScanFailedError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from pylox.scanner import (
    DEFAULT_KEYWORDS,
    KeywordTable,
    Scanner,
    Token,
    TokenType,
    scan,
)

__all__ = [
    "__version__",
    # Scanner
    "DEFAULT_KEYWORDS",
    "KeywordTable",
    "Scanner",
    "Token",
    "TokenType",
    "scan",
    # Errors
    "Diagnostic",
    "ErrorCollector",
    "ErrorReporter",
    "LoxError",
    "ScanError",
    "ScanFailedError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
]
