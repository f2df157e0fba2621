"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single- and two-character punctuation and operators
- Literals (strings and numbers)
- Identifiers and reserved keywords
- The end-of-file marker

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # counter, fib2
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NULL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    A position in the source text, used for diagnostics.

    Lox tokens only track lines, so there is no column here.
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    The lexeme is always the exact slice of the source that produced
    the token. ``literal`` is only set for NUMBER (a float) and STRING
    (the text between the quotes).
    """
    kind: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # Parsed value, or None
    line: int                       # 1-based line of the first character

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.kind.name} {self.lexeme} {self.literal}"
        return f"{self.kind.name} {self.lexeme}".rstrip()

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in {
            TokenType.STRING, TokenType.NUMBER,
            TokenType.TRUE, TokenType.FALSE, TokenType.NULL,
        }

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.kind in _KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.kind in _OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.kind == TokenType.IDENTIFIER


# Reserved words. Built once at import and never mutated, so concurrent
# scanners can read it without locking.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "true": TokenType.TRUE,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "while": TokenType.WHILE,
    "fun": TokenType.FUN,
    "null": TokenType.NULL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "var": TokenType.VAR,
})

SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
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
})

# char -> (kind when followed by '=', kind otherwise)
EQUAL_SUFFIX_TOKENS: Mapping[str, Tuple[TokenType, TokenType]] = MappingProxyType({
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
})

_KEYWORD_TYPES = frozenset(KEYWORDS.values())
_OPERATOR_TYPES = frozenset(
    list(SINGLE_CHAR_TOKENS.values())
    + [kind for pair in EQUAL_SUFFIX_TOKENS.values() for kind in pair]
    + [TokenType.SLASH]
)


def lookup_keyword(text: str) -> Optional[TokenType]:
    """Return the reserved token type for ``text``, or None."""
    return KEYWORDS.get(text)
