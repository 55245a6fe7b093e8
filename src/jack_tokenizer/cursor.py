"""
Line Cursor
===========

A peekable character cursor over a single line of source text.

Lookahead never crosses the end of the line: ``peek`` past the last
character returns the empty string. Constructs that span lines (block
comments, string literals) are resumed through the scanner's ScanState,
not through cross-line lookahead.
"""


class LineCursor:
    """
    Cursor over one line of source.

    Usage:
        cursor = LineCursor("let x = 1;")
        while not cursor.at_end():
            char = cursor.advance()
            if char == "/" and cursor.peek() == "/":
                ...
    """

    def __init__(self, line: str):
        self.line = line
        self._pos = 0

    @property
    def column(self) -> int:
        """1-indexed column of the next unread character."""
        return self._pos + 1

    def at_end(self) -> bool:
        """Check if every character of the line has been consumed."""
        return self._pos >= len(self.line)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at current position + offset without advancing.

        Returns empty string if past the end of the line.
        """
        pos = self._pos + offset
        if pos < 0 or pos >= len(self.line):
            return ""
        return self.line[pos]

    def advance(self) -> str:
        """Consume and return the current character ("" at end of line)."""
        if self.at_end():
            return ""
        char = self.line[self._pos]
        self._pos += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the next character if it matches expected."""
        if expected and self.peek() == expected:
            self._pos += 1
            return True
        return False

    def remaining(self) -> str:
        """Return the unread rest of the line without consuming it."""
        return self.line[self._pos:]
