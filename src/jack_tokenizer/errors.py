"""
Jack Tokenizer Error Hierarchy
==============================

This module defines the exception hierarchy for the Jack tokenizer.
All exceptions inherit from JackError, allowing callers to catch every
tokenizer-related error with a single except clause if desired.

Exception Hierarchy
-------------------
JackError (base)
└── JackSyntaxError - lexical errors in source
    ├── IdentifierStartsWithDigitError - word such as '1abc'
    └── UnterminatedError - file ends inside a comment or string (strict mode)

Error Message Format
--------------------
Lexical errors carry source location information and follow this format:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing

Example:
    Main.jack:3:13: error: identifier '1abc' cannot start with a digit
            let x = 1abc;
                    ^
    hint: identifiers must begin with a letter or underscore

I/O errors (unreadable source, unwritable output) are not part of this
hierarchy; they propagate as the built-in OSError subclasses.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class JackError(Exception):
    """
    Base exception for all Jack tokenizer errors.

    Example:
        try:
            tokens = tokenize(source)
        except JackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


def caret_padding(source_line: str, column: int) -> str:
    """
    Return the whitespace that puts a caret under 1-indexed ``column``.

    Tabs before the column are kept as tabs so the caret lines up with the
    echoed source line however the terminal expands them.
    """
    prefix = source_line[:column - 1]
    padding = "".join("\t" if char == "\t" else " " for char in prefix)
    return padding + " " * (column - 1 - len(prefix))


# =============================================================================
# Lexical Errors
# =============================================================================

class JackSyntaxError(JackError):
    """
    Lexical error in Jack source code.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location, source context, and hint."""
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = caret_padding(self.source_line, self.location.column)
                parts.append(f"    {padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class IdentifierStartsWithDigitError(JackSyntaxError):
    """
    A word begins with a digit but is not an integer constant.

    Raised when the scanner flushes a word such as ``1abc``. This error is
    fatal for the whole run; the scanner has no recovery mode.
    """

    def __init__(
        self,
        word: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.word = word
        super().__init__(
            f"identifier '{word}' cannot start with a digit",
            location=location,
            hint="identifiers must begin with a letter or underscore",
            source_line=source_line,
        )


class UnterminatedError(JackSyntaxError):
    """
    The source ended inside a block comment or a string literal.

    Only raised when strict end-of-file checking is enabled; otherwise the
    condition is logged as a warning.

    Attributes:
        construct: "block comment" or "string literal"
    """

    def __init__(
        self,
        construct: str,
        location: Optional[SourceLocation] = None,
    ):
        self.construct = construct
        closing = "*/" if construct == "block comment" else '"'
        super().__init__(
            f"unterminated {construct} at end of file",
            location=location,
            hint=f"add closing {closing}",
        )
