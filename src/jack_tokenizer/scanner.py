"""
Jack Line Scanner
=================

The lexical state machine at the heart of the tokenizer. ``scan_line``
advances the machine across one line of source text and returns the tokens
found on that line together with the state to carry into the next line.

States
------
| State          | Entered on        | Left on                          |
|----------------|-------------------|----------------------------------|
| NORMAL         | initial, ``*/``   | ``/*`` or ``"``                  |
| BLOCK_COMMENT  | ``/*``            | ``*/``                           |
| STRING_LITERAL | ``"``             | closing ``"`` (StringConstant)   |

A line comment (``//``) is not a state: it discards the rest of the current
line and nothing else.

Word Classification
-------------------
Characters that are neither delimiters nor quotes accumulate into a word.
When a delimiter, a comment marker, a quote or the end of the line is
reached, the word is classified with this precedence:

1. keyword                     -> Keyword
2. all ASCII digits            -> IntegerConstant
3. starts with a digit         -> IdentifierStartsWithDigitError (fatal)
4. anything else               -> Identifier

Example Usage
-------------
>>> from jack_tokenizer.scanner import ScanState, scan_line
>>> state, tokens = scan_line(ScanState(), "let x = 123;")
>>> [t.text for t in tokens]
['let', 'x', '=', '123', ';']
>>> state, tokens = scan_line(state, "/* start")
>>> state.in_block_comment
True
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional
import logging

from jack_tokenizer.classify import (
    is_delimiter,
    is_integer_literal,
    is_keyword,
    is_symbol,
    starts_with_digit,
)
from jack_tokenizer.cursor import LineCursor
from jack_tokenizer.errors import IdentifierStartsWithDigitError, SourceLocation
from jack_tokenizer.tokens import Token, TokenKind

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Scan State
# =============================================================================

class ScanMode(Enum):
    """The three mutually exclusive scanner states."""

    NORMAL = auto()
    BLOCK_COMMENT = auto()
    STRING_LITERAL = auto()


@dataclass(frozen=True)
class ScanState:
    """
    Lexical state carried from one line to the next.

    A fresh ``ScanState()`` starts every source file. Each call to
    ``scan_line`` returns a new instance; states are never modified in place.

    Attributes:
        in_block_comment: Inside an unterminated ``/* ... */`` span
        in_string_literal: Inside an unterminated ``"..."`` span
        string_buffer: Contents accumulated so far for the open string literal
        string_start: (line, column) of the open string's quote, if any
        comment_start: (line, column) of the open block comment's ``/*``, if any
    """
    in_block_comment: bool = False
    in_string_literal: bool = False
    string_buffer: str = ""
    string_start: Optional[tuple[int, int]] = None
    comment_start: Optional[tuple[int, int]] = None

    def __post_init__(self):
        if self.in_block_comment and self.in_string_literal:
            raise ValueError(
                "ScanState cannot be inside a block comment and a string literal"
            )

    @property
    def mode(self) -> ScanMode:
        """Return the scanner state this value represents."""
        if self.in_block_comment:
            return ScanMode.BLOCK_COMMENT
        if self.in_string_literal:
            return ScanMode.STRING_LITERAL
        return ScanMode.NORMAL

    def is_normal(self) -> bool:
        """Return True if neither a comment nor a string is open."""
        return self.mode is ScanMode.NORMAL


class ScanResult(NamedTuple):
    """Result of scanning one line: the next state and the line's tokens."""

    state: ScanState
    tokens: list[Token]


# =============================================================================
# Word Classification
# =============================================================================

def classify_word(
    word: str,
    location: Optional[SourceLocation] = None,
    source_line: Optional[str] = None,
) -> TokenKind:
    """
    Classify an accumulated word as a keyword, integer or identifier.

    Args:
        word: Non-empty run of non-delimiter characters
        location: Position of the word's first character (for errors)
        source_line: Text of the line containing the word (for errors)

    Returns:
        TokenKind.KEYWORD, TokenKind.INTEGER_CONSTANT or TokenKind.IDENTIFIER

    Raises:
        IdentifierStartsWithDigitError: If the word starts with a digit but
            is not entirely digits
    """
    if is_keyword(word):
        return TokenKind.KEYWORD
    if is_integer_literal(word):
        return TokenKind.INTEGER_CONSTANT
    if starts_with_digit(word):
        raise IdentifierStartsWithDigitError(word, location, source_line)
    return TokenKind.IDENTIFIER


# =============================================================================
# Line Scanning
# =============================================================================

def scan_line(
    state: ScanState,
    line: str,
    *,
    line_number: int = 1,
    filename: str = "<input>",
) -> ScanResult:
    """
    Advance the lexical state machine across one line of source text.

    Args:
        state: State carried over from the previous line
        line: The line text, without its line terminator
        line_number: 1-indexed line number (for token positions and errors)
        filename: Source name (for errors)

    Returns:
        ScanResult(state, tokens); unpacks as ``state, tokens = ...``

    Raises:
        IdentifierStartsWithDigitError: On a word such as ``1abc``
    """
    return _LineScanner(state, line, line_number, filename).run()


class _LineScanner:
    """
    Working storage for a single ``scan_line`` call.

    Holds the cursor, the pending word and the tokens found so far. An
    instance lives only for the duration of one line.
    """

    def __init__(
        self,
        state: ScanState,
        line: str,
        line_number: int,
        filename: str,
    ):
        self.line = line
        self.line_number = line_number
        self.filename = filename
        self.cursor = LineCursor(line)

        self.mode = state.mode
        self.string_chars = list(state.string_buffer)
        self.string_start = state.string_start
        self.comment_start = state.comment_start

        self.word: list[str] = []
        self.word_column = 0
        self.tokens: list[Token] = []

    def run(self) -> ScanResult:
        """Scan the whole line and build the result."""
        while not self.cursor.at_end():
            if self.mode is ScanMode.BLOCK_COMMENT:
                self._scan_block_comment()
            elif self.mode is ScanMode.STRING_LITERAL:
                self._scan_string_literal()
            elif not self._scan_normal():
                break

        # End of line is a word boundary
        if self.mode is ScanMode.NORMAL:
            self._flush_word()

        return ScanResult(self._next_state(), self.tokens)

    # =========================================================================
    # State Handlers
    # =========================================================================

    def _scan_block_comment(self) -> None:
        """Discard one comment character, leaving the comment on ``*/``."""
        char = self.cursor.advance()
        if char == "*" and self.cursor.match("/"):
            self.mode = ScanMode.NORMAL
            self.comment_start = None

    def _scan_string_literal(self) -> None:
        """Append one character to the open string, or close it."""
        char = self.cursor.advance()
        if char != '"':
            self.string_chars.append(char)
            return

        line, column = self.string_start or (self.line_number, 0)
        self.tokens.append(
            Token(TokenKind.STRING_CONSTANT, "".join(self.string_chars), line, column)
        )
        self.string_chars = []
        self.string_start = None
        self.mode = ScanMode.NORMAL

    def _scan_normal(self) -> bool:
        """
        Process one character (or two-character marker) outside comments
        and strings.

        Returns:
            False if a line comment ends scanning of this line
        """
        char = self.cursor.peek()
        column = self.cursor.column

        if char == "/" and self.cursor.peek(1) == "/":
            self._flush_word()
            return False

        if char == "/" and self.cursor.peek(1) == "*":
            self._flush_word()
            self.cursor.advance()
            self.cursor.advance()
            self.comment_start = (self.line_number, column)
            self.mode = ScanMode.BLOCK_COMMENT
            return True

        if char == '"':
            self._flush_word()
            self.cursor.advance()
            self.string_chars = []
            self.string_start = (self.line_number, column)
            self.mode = ScanMode.STRING_LITERAL
            return True

        self.cursor.advance()

        if is_delimiter(char):
            self._flush_word()
            if is_symbol(char):
                self.tokens.append(
                    Token(TokenKind.SYMBOL, char, self.line_number, column)
                )
            return True

        if not self.word:
            self.word_column = column
        self.word.append(char)
        return True

    # =========================================================================
    # Helpers
    # =========================================================================

    def _flush_word(self) -> None:
        """Emit the pending word, if any, as a classified token."""
        if not self.word:
            return

        text = "".join(self.word)
        self.word = []
        location = SourceLocation(self.filename, self.line_number, self.word_column)
        kind = classify_word(text, location, self.line)
        self.tokens.append(Token(kind, text, self.line_number, self.word_column))

    def _next_state(self) -> ScanState:
        """Build the state to carry into the next line."""
        if self.mode is ScanMode.BLOCK_COMMENT:
            return ScanState(in_block_comment=True, comment_start=self.comment_start)
        if self.mode is ScanMode.STRING_LITERAL:
            logger.debug(
                f"{self.filename}:{self.line_number}: string literal continues "
                f"past end of line"
            )
            return ScanState(
                in_string_literal=True,
                string_buffer="".join(self.string_chars),
                string_start=self.string_start,
            )
        return ScanState()
