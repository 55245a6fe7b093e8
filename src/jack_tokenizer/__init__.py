"""
Jack Tokenizer - Lexical Analyzer for the Jack Language
=======================================================

This package implements the tokenizer for Jack, the small Java-like
language used in the Nand to Tetris course. It reads source text and emits
a linear sequence of classified tokens, skipping ``//`` and ``/* */``
comments and tracking string literals across lines.

Main Components
---------------
- **scanner**: the per-line lexical state machine (``scan_line``)
- **classify**: keyword and symbol tables and character predicates
- **tokenizer**: the driver that threads scan state through a whole file
- **serialize**: the reference ``<tokens>`` XML serialization
- **cli**: the ``jacktok`` command

Quick Start
-----------
Tokenize a string:
    >>> from jack_tokenizer import tokenize
    >>> [t.kind.tag for t in tokenize("let x = 1;")]
    ['keyword', 'identifier', 'symbol', 'integerConstant', 'symbol']

Scan line by line:
    >>> from jack_tokenizer import ScanState, scan_line
    >>> state, tokens = scan_line(ScanState(), '/* a comment')
    >>> state.in_block_comment
    True

Or use the command-line tool:
    $ jacktok Main.jack            # writes MainT.xml
    $ jacktok Main.jack --stdout
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from jack_tokenizer.errors import (
    JackError,
    JackSyntaxError,
    IdentifierStartsWithDigitError,
    UnterminatedError,
    SourceLocation,
)
from jack_tokenizer.classify import (
    KEYWORDS,
    SYMBOLS,
    is_delimiter,
    is_keyword,
    is_symbol,
)
from jack_tokenizer.tokens import Token, TokenKind
from jack_tokenizer.scanner import (
    ScanMode,
    ScanResult,
    ScanState,
    classify_word,
    scan_line,
)
from jack_tokenizer.config import TokenizerConfig
from jack_tokenizer.tokenizer import (
    JackTokenizer,
    TokenList,
    TokenSink,
    tokenize,
    tokenize_file,
)
from jack_tokenizer.serialize import (
    XmlTokenWriter,
    escape_symbol,
    render_token,
    tokens_to_xml,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "JackError",
    "JackSyntaxError",
    "IdentifierStartsWithDigitError",
    "UnterminatedError",
    "SourceLocation",
    # Classification
    "KEYWORDS",
    "SYMBOLS",
    "is_delimiter",
    "is_keyword",
    "is_symbol",
    # Tokens
    "Token",
    "TokenKind",
    # Scanner
    "ScanMode",
    "ScanResult",
    "ScanState",
    "classify_word",
    "scan_line",
    # Driver
    "TokenizerConfig",
    "JackTokenizer",
    "TokenList",
    "TokenSink",
    "tokenize",
    "tokenize_file",
    # Serialization
    "XmlTokenWriter",
    "escape_symbol",
    "render_token",
    "tokens_to_xml",
]
