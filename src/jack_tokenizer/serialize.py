"""
XML Token Serialization
=======================

Reference serialization of a token stream as tagged text records inside a
``<tokens>`` envelope, one record per line:

    <tokens>
    <keyword> class </keyword>
    <identifier> Main </identifier>
    <symbol> { </symbol>
    <symbol> &lt; </symbol>
    <integerConstant> 42 </integerConstant>
    <stringConstant> hello </stringConstant>
    </tokens>

Escaping
--------
| Character | Rendered as |
|-----------|-------------|
| <         | &lt;        |
| >         | &gt;        |
| &         | &amp;       |
| "         | &quot;      |

All other characters render literally. A double quote never reaches symbol
emission (the scanner consumes it as a string delimiter) but is escaped for
completeness.
"""

from typing import Iterable, TextIO
import io
import logging

from jack_tokenizer.tokens import Token

logger = logging.getLogger(__name__)


XML_ESCAPES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
}

ENVELOPE_TAG = "tokens"


def escape_symbol(text: str) -> str:
    """Replace the four markup-sensitive characters with XML entities."""
    return "".join(XML_ESCAPES.get(c, c) for c in text)


def render_token(token: Token) -> str:
    """Render one token as ``<tag> text </tag>``."""
    tag = token.kind.tag
    return f"<{tag}> {escape_symbol(token.text)} </{tag}>"


class XmlTokenWriter:
    """
    Token sink that writes the XML serialization to a text stream.

    Used as a context manager, the envelope is opened on entry and closed on
    a clean exit. When the body raises, the closing tag is not written.

    Usage:
        with open("MainT.xml", "w") as f, XmlTokenWriter(f) as writer:
            for token in tokens:
                writer.emit(token)
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.count = 0
        self._open = False

    def __enter__(self) -> "XmlTokenWriter":
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.end()

    def begin(self) -> None:
        """Write the opening envelope tag."""
        self.stream.write(f"<{ENVELOPE_TAG}>\n")
        self._open = True

    def emit(self, token: Token) -> None:
        """Write one token record."""
        if not self._open:
            raise RuntimeError("XmlTokenWriter.emit() called before begin()")
        self.stream.write(render_token(token) + "\n")
        self.count += 1

    def end(self) -> None:
        """Write the closing envelope tag."""
        self.stream.write(f"</{ENVELOPE_TAG}>\n")
        self._open = False
        logger.debug(f"Wrote {self.count} token records")


def tokens_to_xml(tokens: Iterable[Token]) -> str:
    """Serialize a token sequence to a complete ``<tokens>`` document."""
    buffer = io.StringIO()
    with XmlTokenWriter(buffer) as writer:
        for token in tokens:
            writer.emit(token)
    return buffer.getvalue()
