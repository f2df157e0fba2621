"""
Lox Scanner - turns source text into tokens

Single pass, left to right. Every call to scan_tokens() starts from a
fresh cursor, so one Scanner can be reused but never shared between
threads while a scan is running.

Errors don't stop the scan. The sub-scanners raise a LexerError, the
main loop records it, hands it to the reporter and carries on with the
next character.

xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS,
    lookup_keyword
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error, create_unterminated_comment_error
)

logger = logging.getLogger(__name__)

# report(line, where, message)
Reporter = Callable[[int, str, str], None]

WHITESPACE = (' ', '\r', '\t')


@dataclass
class ScanResult:
    """Tokens plus every error reported while producing them."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens ending in exactly one EOF
    token, collecting lexical errors along the way.
    """

    def __init__(self, source: str, filename: str = "<script>",
                 reporter: Optional[Reporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            filename: Name of source file for error reporting
            reporter: Optional callback invoked as report(line, where, message)
                for each error as it is found
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source text.

        Returns:
            List of tokens including the trailing EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                # The offending input is already consumed, just record it
                self._record_error(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug("Scanned %s: %d tokens, %d errors",
                     self.filename, len(self.tokens), len(self.errors))
        return self.tokens

    def _scan_token(self):
        """Consume one character and dispatch on it."""
        c = self._advance()

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            combined, single = EQUAL_SUFFIX_TOKENS[c]
            self._add_token(combined if self._match('=') else single)
        elif c == '/':
            if self._match('/'):
                self._skip_line_comment()
            elif self._match('*'):
                self._skip_block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif c in WHITESPACE:
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self._scan_string()
        elif _is_digit(c):
            self._scan_number()
        elif _is_alpha(c):
            self._scan_identifier()
        else:
            raise create_unexpected_character_error(c, self._location())

    def _scan_string(self):
        """Scan a string literal. No escape sequences."""
        start_line = self.line
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self.line += 1
            self.current += 1

        if self._is_at_end():
            raise create_unterminated_string_error(self._location())

        self.current += 1  # closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _scan_number(self):
        """Scan an integer or decimal literal, always parsed as a float."""
        while _is_digit(self._peek()):
            self.current += 1

        # A trailing '.' without digits after it belongs to the next token
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self.current += 1
            while _is_digit(self._peek()):
                self.current += 1

        lexeme = self.source[self.start:self.current]
        self._add_token(TokenType.NUMBER, float(lexeme))

    def _scan_identifier(self):
        """Scan an identifier or reserved word."""
        while _is_identifier_continue(self._peek()):
            self.current += 1

        text = self.source[self.start:self.current]
        kind = lookup_keyword(text)
        self._add_token(kind if kind is not None else TokenType.IDENTIFIER)

    def _skip_line_comment(self):
        # Stop before the newline so the main loop counts it
        while self._peek() != '\n' and not self._is_at_end():
            self.current += 1

    def _skip_block_comment(self):
        """Skip a /* ... */ comment, counting the newlines inside it."""
        start_line = self.line
        end = self.source.find("*/", self.current)

        if end == -1:
            self.line += self.source.count('\n', self.current)
            self.current = len(self.source)
            raise create_unterminated_comment_error(
                SourceLocation(self.filename, start_line)
            )

        self.line += self.source.count('\n', self.current, end)
        self.current = end + 2

    def _record_error(self, error: LexerError):
        self.errors.append(error)
        logger.debug("%s at %s: %s", error.kind, error.diagnostic.location, error.message)
        if self.reporter is not None:
            self.reporter(error.line, error.where, error.message)

    def _add_token(self, kind: TokenType, literal=None, line: Optional[int] = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(kind, lexeme, literal, self.line if line is None else line))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line)

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def has_errors(self) -> bool:
        """Check if the last scan reported any errors."""
        return len(self.errors) > 0


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def _is_alpha(c: str) -> bool:
    return c.isalpha()


def _is_identifier_continue(c: str) -> bool:
    # Any Unicode letter or decimal digit, e.g. 'a٣' is one identifier
    return c.isalpha() or c.isdecimal()


def scan(source: str, filename: str = "<script>",
         reporter: Optional[Reporter] = None) -> ScanResult:
    """
    Scan a complete source text.

    Args:
        source: Source code string
        filename: Filename for error reporting
        reporter: Optional report(line, where, message) callback

    Returns:
        ScanResult holding the tokens and the errors found
    """
    scanner = Scanner(source, filename, reporter)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, list(scanner.errors))


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: The first error found, if any
    """
    result = scan(source, filename)

    if result.has_errors():
        raise result.errors[0]

    return result.tokens


def tokenize_file(filepath: str, encoding: str = "utf-8") -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: The first error found, if any
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return tokenize_string(source, filepath)
