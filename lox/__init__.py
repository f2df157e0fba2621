"""
Lox Package

A Python implementation of the front end of the Lox scripting language.
Only lexical analysis exists so far; the parser and interpreter are not
written yet.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    ├── utils/           # Logging setup
    ├── config.py        # Runtime settings for the command line tool
    └── cli.py           # `lox [script]` entry point and REPL

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@lox-lang.org"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
