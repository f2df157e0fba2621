"""
Lox Lexer Package

Implements the lexical scanner for the Lox scripting language: raw source
text in, an ordered list of classified tokens out.

Key Features:
- Single-pass scanning with maximal munch for two-character operators
- Line and block comments, with line tracking through both
- String and number literals with parsed values
- Case-sensitive reserved words from an immutable keyword table
- Error recovery: every lexical error in a run is collected and reported

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, lookup_keyword
from .scanner import Scanner, ScanResult, scan, tokenize_string, tokenize_file
from .errors import (
    Diagnostic, LexerError, UnterminatedStringError,
    UnexpectedCharacterError, UnterminatedCommentError
)

__all__ = [
    "Scanner",
    "ScanResult",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "lookup_keyword",
    "Diagnostic",
    "LexerError",
    "UnterminatedStringError",
    "UnexpectedCharacterError",
    "UnterminatedCommentError",
]
