"""
Jack Token Types
================

The five lexical categories of the Jack language and the immutable Token
record the scanner emits.

The value of each TokenKind is the tag used by the reference XML
serialization, e.g. ``TokenKind.INTEGER_CONSTANT.value == "integerConstant"``.
"""

from dataclasses import dataclass, field
from enum import Enum

from jack_tokenizer.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical category of a token."""

    KEYWORD = "keyword"                     # class, let, while, ...
    SYMBOL = "symbol"                       # { } ( ) ... =  ~
    IDENTIFIER = "identifier"               # Main, x, count1
    INTEGER_CONSTANT = "integerConstant"    # 0, 42, 32767
    STRING_CONSTANT = "stringConstant"      # "hello" (quotes stripped)

    @property
    def tag(self) -> str:
        """XML element name for this kind."""
        return self.value


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexical unit.

    Equality compares kind and text only; the position is informational.

    Attributes:
        kind: The TokenKind classification
        text: Literal text of the token. For symbols this is the raw
              character; escaping belongs to serialization. For string
              constants the surrounding quotes are not included.
        line: Line number of the first character (1-indexed, 0 if unknown)
        column: Column of the first character (1-indexed, 0 if unknown)
    """
    kind: TokenKind
    text: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)
