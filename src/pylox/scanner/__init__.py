"""
Lox Scanner Package
===================

Lexical analysis for Lox: source text in, tokens out.

    Source → Scanner → [Token, Token, ..., EOF] → (parser)

Usage
-----
>>> from pylox.scanner import scan
>>> [token.type.name for token in scan("print 1;")]
['PRINT', 'NUMBER', 'SEMICOLON', 'EOF']
"""

from pylox.scanner.keywords import DEFAULT_KEYWORDS, KeywordTable
from pylox.scanner.scanner import Scanner, scan
from pylox.scanner.token import KEYWORD_TYPES, LITERAL_TYPES, Token, TokenType

__all__ = [
    "DEFAULT_KEYWORDS",
    "KEYWORD_TYPES",
    "KeywordTable",
    "LITERAL_TYPES",
    "Scanner",
    "Token",
    "TokenType",
    "scan",
]
