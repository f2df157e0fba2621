"""
Error handling for the Lox scanner.

Lexical errors are raised by the literal sub-scanners and caught by the
main scan loop, which records them and keeps going. That way a single
pass reports every problem in the source.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single reported lexical problem."""
    message: str
    location: SourceLocation
    where: str = ""                 # Extra location context, e.g. " at end"
    help_text: Optional[str] = None

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        result = f"[line {self.location.line}] Error{self.where}: {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Base class for errors found while scanning.

    Contains the diagnostic that gets handed to the host's reporter.
    """

    kind = "LexerError"

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        where: str = "",
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            where=where,
            help_text=help_text
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def where(self) -> str:
        return self.diagnostic.where

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnterminatedStringError(LexerError):
    """Input ended before the closing double quote."""
    kind = "UnterminatedString"


class UnexpectedCharacterError(LexerError):
    """A character that is not part of the lexical grammar."""
    kind = "UnexpectedCharacter"


class UnterminatedCommentError(LexerError):
    """A ``/*`` comment with no matching ``*/``."""
    kind = "UnterminatedComment"


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, location: SourceLocation) -> UnexpectedCharacterError:
    """Create an error for a character outside the grammar."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedCharacterError(
        message="Unexpected character.",
        location=location,
        help_text=help_text
    )


def create_unterminated_string_error(location: SourceLocation) -> UnterminatedStringError:
    """Create an error for a string literal that never closes."""
    return UnterminatedStringError(
        message="Unterminated string.",
        location=location,
        where=" at end",
        help_text="String literals must be closed with a matching \" quote."
    )


def create_unterminated_comment_error(location: SourceLocation) -> UnterminatedCommentError:
    """Create an error for a block comment that never closes."""
    return UnterminatedCommentError(
        message="Unterminated block comment.",
        location=location,
        where=" at end",
        help_text="Block comments must be closed with */."
    )
