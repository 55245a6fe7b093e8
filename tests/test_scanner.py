# =============================================================================
# test_scanner.py - Line Scanner Unit Tests
# =============================================================================
# Tests for scan_line, the per-line lexical state machine.
#
# Test coverage includes:
#   - Word classification (keyword > integer > identifier)
#   - Symbols and delimiters
#   - Line comments and block comments, including across lines
#   - String literals, including across lines
#   - The digit-prefixed identifier error
#   - ScanState invariants
# =============================================================================

import pytest
from jack_tokenizer.errors import IdentifierStartsWithDigitError
from jack_tokenizer.scanner import (
    ScanMode,
    ScanState,
    classify_word,
    scan_line,
)
from jack_tokenizer.tokens import Token, TokenKind


# =============================================================================
# Helper Functions
# =============================================================================

def kinds_and_texts(tokens) -> list:
    """Reduce tokens to (kind, text) pairs for compact assertions."""
    return [(t.kind, t.text) for t in tokens]


def scan(line: str) -> list:
    """Scan a single line from a fresh state and return (kind, text) pairs."""
    _, tokens = scan_line(ScanState(), line)
    return kinds_and_texts(tokens)


def scan_lines(lines) -> tuple:
    """Scan several lines in order, returning the final state and all tokens."""
    state = ScanState()
    tokens = []
    for number, line in enumerate(lines, start=1):
        state, line_tokens = scan_line(state, line, line_number=number)
        tokens.extend(line_tokens)
    return state, kinds_and_texts(tokens)


K = TokenKind.KEYWORD
S = TokenKind.SYMBOL
I = TokenKind.IDENTIFIER
N = TokenKind.INTEGER_CONSTANT
STR = TokenKind.STRING_CONSTANT


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test recognition of words and symbols on a single line."""

    def test_empty_line(self):
        assert scan("") == []

    def test_whitespace_only(self):
        assert scan("   \t  ") == []

    def test_let_statement(self):
        """let x = 123; yields keyword, identifier, symbol, integer, symbol."""
        assert scan("let x = 123;") == [
            (K, "let"), (I, "x"), (S, "="), (N, "123"), (S, ";"),
        ]

    def test_one_token_per_word(self):
        """Each whitespace-delimited run becomes one token."""
        assert scan("class Main while 42 count1") == [
            (K, "class"), (I, "Main"), (K, "while"), (N, "42"), (I, "count1"),
        ]

    def test_words_split_by_symbols(self):
        """Symbols end words without needing whitespace."""
        assert scan("do Output.printInt(x);") == [
            (K, "do"), (I, "Output"), (S, "."), (I, "printInt"),
            (S, "("), (I, "x"), (S, ")"), (S, ";"),
        ]

    def test_all_symbols(self):
        line = "{}()[].,;+-*/&|<>=~"
        assert scan(line) == [(S, c) for c in line]

    def test_tab_delimits(self):
        assert scan("var\tint\tx") == [(K, "var"), (K, "int"), (I, "x")]

    def test_word_at_end_of_line_is_flushed(self):
        assert scan("return result") == [(K, "return"), (I, "result")]

    def test_keyword_precedence_over_identifier(self):
        assert scan("this thisOne") == [(K, "this"), (I, "thisOne")]

    def test_leading_zero_integer_keeps_text(self):
        assert scan("007") == [(N, "007")]

    def test_underscore_identifier(self):
        assert scan("_tmp my_var") == [(I, "_tmp"), (I, "my_var")]

    def test_trailing_symbol_attached(self):
        assert scan("x-1") == [(I, "x"), (S, "-"), (N, "1")]

    def test_token_positions(self):
        """Tokens record the line and column of their first character."""
        _, tokens = scan_line(ScanState(), "let  x=10;", line_number=7)
        assert [(t.line, t.column) for t in tokens] == [
            (7, 1), (7, 6), (7, 7), (7, 8), (7, 10),
        ]


# =============================================================================
# Digit-Prefixed Identifier Tests
# =============================================================================

class TestIdentifierStartsWithDigit:
    """Test the fatal lexical error."""

    def test_digit_prefix_raises(self):
        with pytest.raises(IdentifierStartsWithDigitError) as exc_info:
            scan("1abc")
        assert exc_info.value.word == "1abc"

    def test_digit_suffix_is_identifier(self):
        assert scan("abc1") == [(I, "abc1")]

    def test_error_location(self):
        with pytest.raises(IdentifierStartsWithDigitError) as exc_info:
            scan_line(ScanState(), "let x = 2b;", line_number=4, filename="Main.jack")
        error = exc_info.value
        assert error.location.filename == "Main.jack"
        assert error.location.line == 4
        assert error.location.column == 9
        assert "Main.jack:4:9: error:" in str(error)
        assert "let x = 2b;" in str(error)

    def test_error_raised_at_delimiter(self):
        """The error is raised when the offending word ends, mid-line."""
        with pytest.raises(IdentifierStartsWithDigitError):
            scan("9lives; let")

    def test_digit_prefix_inside_string_is_fine(self):
        assert scan('"1abc"') == [(STR, "1abc")]

    def test_digit_prefix_inside_comment_is_fine(self):
        assert scan("// 1abc") == []
        assert scan("/* 1abc */") == []


class TestClassifyWord:
    """Test classify_word directly."""

    def test_precedence(self):
        assert classify_word("while") is TokenKind.KEYWORD
        assert classify_word("12") is TokenKind.INTEGER_CONSTANT
        assert classify_word("x12") is TokenKind.IDENTIFIER

    def test_raises_for_digit_prefix(self):
        with pytest.raises(IdentifierStartsWithDigitError):
            classify_word("12x")


# =============================================================================
# Line Comment Tests
# =============================================================================

class TestLineComments:
    """Test // comments."""

    def test_comment_line_yields_nothing(self):
        state, tokens = scan_line(ScanState(), '// comment text {}"foo"')
        assert tokens == []
        assert state == ScanState()
        assert state.is_normal()

    def test_comment_after_code(self):
        assert scan("let x = 1; // set x") == [
            (K, "let"), (I, "x"), (S, "="), (N, "1"), (S, ";"),
        ]

    def test_comment_directly_after_word(self):
        """// is an atomic marker even with no space before it."""
        assert scan("x//comment") == [(I, "x")]

    def test_comment_hides_digit_error(self):
        assert scan("y // 1abc") == [(I, "y")]

    def test_single_slash_is_symbol(self):
        assert scan("a / b") == [(I, "a"), (S, "/"), (I, "b")]

    def test_slash_at_end_of_line(self):
        """Lookahead does not cross the end of the line."""
        state, tokens = scan_line(ScanState(), "a /")
        assert kinds_and_texts(tokens) == [(I, "a"), (S, "/")]
        _, tokens = scan_line(state, "/ b")
        assert kinds_and_texts(tokens) == [(S, "/"), (I, "b")]

    def test_comment_does_not_change_state(self):
        state, _ = scan_line(ScanState(), "// /* not a block comment")
        assert not state.in_block_comment


# =============================================================================
# Block Comment Tests
# =============================================================================

class TestBlockComments:
    """Test /* */ comments, on one line and across lines."""

    def test_inline_block_comment(self):
        assert scan("a /* hidden */ b") == [(I, "a"), (I, "b")]

    def test_block_comment_directly_after_word(self):
        assert scan("a/*x*/b") == [(I, "a"), (I, "b")]

    def test_doc_comment(self):
        assert scan("/** Returns x. */") == []

    def test_slash_star_slash_does_not_close(self):
        state, tokens = scan_line(ScanState(), "/*/ still inside")
        assert tokens == []
        assert state.in_block_comment

    def test_star_slash_outside_comment_is_symbols(self):
        assert scan("a */ b") == [(I, "a"), (S, "*"), (S, "/"), (I, "b")]

    def test_multi_line_block_comment(self):
        state = ScanState()

        state, tokens = scan_line(state, "/* start")
        assert tokens == []
        assert state.in_block_comment

        state, tokens = scan_line(state, "still inside { let 1abc }")
        assert tokens == []
        assert state.in_block_comment

        state, tokens = scan_line(state, "end */ x")
        assert kinds_and_texts(tokens) == [(I, "x")]
        assert not state.in_block_comment
        assert state.mode is ScanMode.NORMAL

    def test_comment_reopened_on_same_line(self):
        state, tokens = scan_line(ScanState(), "/* a */ b /* c")
        assert kinds_and_texts(tokens) == [(I, "b")]
        assert state.in_block_comment
        assert state.comment_start == (1, 11)

    def test_comment_start_carried_across_lines(self):
        state, _ = scan_line(ScanState(), "x = 1; /* open", line_number=4)
        assert state.comment_start == (4, 8)
        state, _ = scan_line(state, "still inside", line_number=5)
        assert state.comment_start == (4, 8)
        state, _ = scan_line(state, "*/ y", line_number=6)
        assert state == ScanState()

    def test_quotes_inside_comment_are_ignored(self):
        state, tokens = scan_line(ScanState(), '/* "not a string */ x')
        assert kinds_and_texts(tokens) == [(I, "x")]
        assert not state.in_string_literal


# =============================================================================
# String Literal Tests
# =============================================================================

class TestStringLiterals:
    """Test string constants, on one line and across lines."""

    def test_simple_string(self):
        """"abc" is one string constant and nothing else."""
        assert scan('"abc"') == [(STR, "abc")]

    def test_empty_string(self):
        assert scan('""') == [(STR, "")]

    def test_string_keeps_symbols_and_spaces(self):
        assert scan('"a + b; {x}"') == [(STR, "a + b; {x}")]

    def test_comment_markers_inside_string(self):
        assert scan('"http://x /* y */"') == [(STR, "http://x /* y */")]

    def test_string_in_statement(self):
        assert scan('do Output.printString("Hi there");') == [
            (K, "do"), (I, "Output"), (S, "."), (I, "printString"),
            (S, "("), (STR, "Hi there"), (S, ")"), (S, ";"),
        ]

    def test_word_before_quote_is_flushed(self):
        assert scan('abc"hi"def') == [(I, "abc"), (STR, "hi"), (I, "def")]

    def test_string_position_is_opening_quote(self):
        _, tokens = scan_line(ScanState(), 'let s = "x";', line_number=2)
        string_token = tokens[3]
        assert string_token.kind is STR
        assert (string_token.line, string_token.column) == (2, 9)

    def test_unclosed_string_carries_state(self):
        state, tokens = scan_line(ScanState(), 'let s = "hello ', line_number=1)
        assert kinds_and_texts(tokens) == [(K, "let"), (I, "s"), (S, "=")]
        assert state.in_string_literal
        assert state.string_buffer == "hello "
        assert state.string_start == (1, 9)

    def test_string_across_lines(self):
        state, tokens = scan_lines(['let s = "hello ', 'world";'])
        assert tokens == [
            (K, "let"), (I, "s"), (S, "="), (STR, "hello world"), (S, ";"),
        ]
        assert state == ScanState()

    def test_multi_line_string_token_position(self):
        state, _ = scan_line(ScanState(), 'x "ab', line_number=3)
        _, tokens = scan_line(state, 'cd"', line_number=4)
        assert tokens[0].text == "abcd"
        assert (tokens[0].line, tokens[0].column) == (3, 3)

    def test_string_does_not_start_block_comment(self):
        state, _ = scan_line(ScanState(), '"/*"')
        assert state.is_normal()


# =============================================================================
# ScanState Tests
# =============================================================================

class TestScanState:
    """Test the immutable cross-line state."""

    def test_fresh_state(self):
        state = ScanState()
        assert not state.in_block_comment
        assert not state.in_string_literal
        assert state.string_buffer == ""
        assert state.mode is ScanMode.NORMAL

    def test_comment_and_string_are_exclusive(self):
        with pytest.raises(ValueError):
            ScanState(in_block_comment=True, in_string_literal=True)

    def test_state_is_immutable(self):
        state = ScanState()
        with pytest.raises(AttributeError):
            state.in_block_comment = True

    def test_input_state_not_modified(self):
        start = ScanState(in_string_literal=True, string_buffer="ab")
        scan_line(start, 'c" x')
        assert start.string_buffer == "ab"
        assert start.in_string_literal

    def test_result_unpacks(self):
        result = scan_line(ScanState(), "x")
        state, tokens = result
        assert state is result.state
        assert tokens is result.tokens

    def test_deterministic(self):
        line = 'class Main { field int x; /* c */ let s = "t"; }'
        first = scan_line(ScanState(), line)
        second = scan_line(ScanState(), line)
        assert first.state == second.state
        assert first.tokens == second.tokens
        assert [repr(t) for t in first.tokens] == [repr(t) for t in second.tokens]

    def test_token_equality_ignores_position(self):
        assert Token(I, "x", 1, 1) == Token(I, "x", 9, 9)
        assert Token(I, "x") != Token(K, "x")


# =============================================================================
# Line Cursor Tests
# =============================================================================

class TestLineCursor:
    """Test the single-line peekable cursor."""

    def test_peek_and_advance(self):
        from jack_tokenizer.cursor import LineCursor

        cursor = LineCursor("ab")
        assert cursor.column == 1
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.advance() == "a"
        assert cursor.column == 2
        assert cursor.remaining() == "b"

    def test_no_lookahead_past_line(self):
        from jack_tokenizer.cursor import LineCursor

        cursor = LineCursor("/")
        assert cursor.peek(1) == ""
        cursor.advance()
        assert cursor.at_end()
        assert cursor.advance() == ""
        assert not cursor.match("")

    def test_match(self):
        from jack_tokenizer.cursor import LineCursor

        cursor = LineCursor("*/")
        assert not cursor.match("/")
        assert cursor.match("*")
        assert cursor.match("/")
        assert cursor.at_end()
