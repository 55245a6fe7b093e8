"""
Jack Tokenizer Driver
=====================

Feeds a Jack source file through the line scanner in file order and delivers
the tokens to a sink.

Pipeline
--------
    source text -> lines -> scan_line (state threaded) -> TokenSink

The driver owns the ScanState: it starts each file from a fresh state,
passes each line's resulting state to the next line, and discards it at the
end of the file.

Usage
-----
>>> from jack_tokenizer import tokenize
>>> [t.text for t in tokenize('class Main { }')]
['class', 'Main', '{', '}']

Tokenizing a file into XML:
>>> from jack_tokenizer import tokenize_file, tokens_to_xml
>>> xml = tokens_to_xml(tokenize_file("Main.jack"))  # doctest: +SKIP
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Protocol, Union
import logging

from jack_tokenizer.config import TokenizerConfig
from jack_tokenizer.errors import SourceLocation, UnterminatedError
from jack_tokenizer.scanner import ScanMode, ScanState, scan_line
from jack_tokenizer.tokens import Token

logger = logging.getLogger(__name__)


# =============================================================================
# Line Splitting
# =============================================================================

def split_lines(source: str) -> list[str]:
    """
    Split source text into lines at ``\\n`` only.

    One trailing ``\\r`` is removed from each line, so CRLF files behave like
    LF files. Other characters that ``str.splitlines()`` treats as line
    breaks (form feed, ``\\u2028``, ...) stay part of the line. A final
    newline does not produce an extra empty line.
    """
    lines = [line.removesuffix("\r") for line in source.split("\n")]
    if source.endswith("\n"):
        lines.pop()
    return lines


# =============================================================================
# Token Sinks
# =============================================================================

class TokenSink(Protocol):
    """Anything that accepts classified tokens in scan order."""

    def emit(self, token: Token) -> None:
        ...


class TokenList(list):
    """A list that doubles as a token sink."""

    def emit(self, token: Token) -> None:
        self.append(token)


# =============================================================================
# Driver
# =============================================================================

class JackTokenizer:
    """
    Tokenizes Jack source one line at a time.

    Usage:
        tokenizer = JackTokenizer("Main.jack")
        for line in lines:
            tokens = tokenizer.feed_line(line)
        tokenizer.finish()

    Attributes:
        filename: Name of the source (for error messages)
        config: Tokenizer configuration
        state: The ScanState to be used for the next line
        line_number: Number of the next line to be fed (1-indexed)
    """

    def __init__(
        self,
        filename: str = "<input>",
        config: Optional[TokenizerConfig] = None,
    ):
        self.filename = filename
        self.config = config or TokenizerConfig()
        self.reset()

    def reset(self) -> None:
        """Discard any state and start a new file."""
        self.state = ScanState()
        self.line_number = 1

    def feed_line(self, line: str) -> list[Token]:
        """
        Scan one line and advance the state.

        Raises:
            IdentifierStartsWithDigitError: On a word such as ``1abc``
        """
        previous = self.state.mode
        self.state, tokens = scan_line(
            self.state,
            line,
            line_number=self.line_number,
            filename=self.filename,
        )
        if self.state.mode is not previous:
            logger.debug(
                f"{self.filename}:{self.line_number}: "
                f"{previous.name} -> {self.state.mode.name}"
            )
        self.line_number += 1
        return tokens

    def feed_lines(self, lines: Iterable[str]) -> Iterator[Token]:
        """Scan lines in order, yielding their tokens."""
        for line in lines:
            yield from self.feed_line(line)

    def finish(self) -> ScanState:
        """
        Mark the end of the file and reset for reuse.

        Returns:
            The final ScanState of the file

        Raises:
            UnterminatedError: If config.strict_eof is set and the file ended
                inside a block comment or string literal
        """
        final = self.state
        self.reset()

        if final.mode is ScanMode.NORMAL:
            return final

        construct = (
            "block comment" if final.mode is ScanMode.BLOCK_COMMENT
            else "string literal"
        )
        start = final.comment_start or final.string_start
        location = None
        if start is not None:
            location = SourceLocation(self.filename, *start)

        if self.config.strict_eof:
            raise UnterminatedError(construct, location)

        logger.warning(f"{self.filename}: unterminated {construct} at end of file")
        return final

    def tokenize_to(self, source: str, sink: TokenSink) -> int:
        """
        Tokenize a complete source text into a sink.

        Returns:
            Number of tokens emitted
        """
        self.reset()
        count = 0
        for token in self.feed_lines(split_lines(source)):
            sink.emit(token)
            count += 1
        self.finish()
        logger.debug(f"{self.filename}: {count} tokens")
        return count

    def tokenize(self, source: str) -> list[Token]:
        """Tokenize a complete source text from a fresh state."""
        tokens = TokenList()
        self.tokenize_to(source, tokens)
        return list(tokens)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """Tokenize Jack source text with the default configuration."""
    return JackTokenizer(filename).tokenize(source)


def tokenize_file(
    path: Union[str, Path],
    config: Optional[TokenizerConfig] = None,
) -> list[Token]:
    """
    Read and tokenize a Jack source file.

    Raises:
        OSError: If the file cannot be read
        JackSyntaxError: On a lexical error
    """
    path = Path(path)
    config = config or TokenizerConfig()
    source = path.read_text(encoding=config.encoding)
    return JackTokenizer(str(path), config).tokenize(source)
