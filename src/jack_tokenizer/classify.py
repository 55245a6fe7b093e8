"""
Character Classifiers
=====================

Static lexical tables for the Jack language and the pure predicates the
scanner uses to classify characters and words.

Symbols
-------
    {  }  (  )  [  ]  .  ,  ;  +  -  *  /  &  |  <  >  =  ~

Keywords
--------
    class constructor function method int boolean char void var static
    field let do if else while return true false null this

Every predicate here is total: it accepts any string (including the empty
string) and never raises.
"""

import string


# =============================================================================
# Lexical Tables
# =============================================================================

SYMBOLS: frozenset[str] = frozenset("{}()[].,;+-*/&|<>=~")

KEYWORDS: frozenset[str] = frozenset({
    # Program structure
    "class", "constructor", "function", "method",
    # Types
    "int", "boolean", "char", "void",
    # Variable declarations
    "var", "static", "field",
    # Statements
    "let", "do", "if", "else", "while", "return",
    # Constants
    "true", "false", "null", "this",
})

# Characters other than symbols that end a word
WHITESPACE = (" ", "\t", "\n")

DIGITS = string.digits


# =============================================================================
# Predicates
# =============================================================================

def is_symbol(c: str) -> bool:
    """Return True if c is one of the 19 symbol characters."""
    return c in SYMBOLS


def is_delimiter(c: str) -> bool:
    """Return True if c ends a word: a symbol, space, tab or newline."""
    return c in SYMBOLS or c in WHITESPACE


def is_keyword(word: str) -> bool:
    """Return True if word is a reserved word (exact, case-sensitive)."""
    return word in KEYWORDS


def is_integer_literal(word: str) -> bool:
    """
    Return True if word is a base-10 integer made only of ASCII digits.

    Signs, underscores and non-ASCII digits are not accepted.
    """
    return word != "" and all(c in DIGITS for c in word)


def starts_with_digit(word: str) -> bool:
    """Return True if the first character of word is an ASCII digit."""
    return word[:1] != "" and word[0] in DIGITS
