"""Vocabulary of the C/C++ lexer: automaton states, tokens, keywords, operators, spaces."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class State(enum.Enum):
    """States of the lexer automaton; a token carries the state it ended in."""

    ST = enum.auto()
    OPER = enum.auto()
    KW = enum.auto()
    ID = enum.auto()
    NUM = enum.auto()
    FNUM = enum.auto()
    LIT = enum.auto()
    COM = enum.auto()
    UNDEF = enum.auto()


@dataclass(frozen=True)
class Token:
    """A lexem with its kind and its [begin, end) span within the analysed line."""

    name: str
    type: State
    begin: int
    end: int


_C_KEYWORDS = """
    auto break case char const continue default do double else enum extern
    float for goto if int long register return short signed sizeof static
    struct switch typedef union unsigned void volatile while
"""

_CPP_KEYWORDS = """
    alignof asm bool catch class const_cast delete delete[] dynamic_cast
    explicit export false friend inline mutable namespace new operator
    private protected public reinterpret_cast<>() static_cast<>() template
    this throw true try typeid typename using virtual wchar_t
"""

KEYWORDS = frozenset(_C_KEYWORDS.split()) | frozenset(_CPP_KEYWORDS.split())

_OPERATOR_GROUPS = {
    "arithmetic": "+ - * / % ++ --",
    "comparison": "== != > < >= <=",
    "logical": "! && ||",
    "bitwise": "~ & | ^ << >>",
    "assignment": "= += -= *= /= %= &= |= ^= <<= >>=",
    "access": "[ ] ( ) -> ->* . .* ::",
    "punctuation": "# , ? : { } ;",
}

OPERATORS = frozenset(
    op for group in _OPERATOR_GROUPS.values() for op in group.split()
)

SPACES = frozenset("\n \r\t\0\v\u2029")

NEXT_LINE = "\n"
DOT = "."
BEGIN_COMMENT_BLOCK = "/*"
END_COMMENT_BLOCK = "*/"


def is_keyword(lexem: str) -> bool:
    """Return True if *lexem* is a C/C++ keyword."""
    return lexem in KEYWORDS


def is_operator(lexem: str) -> bool:
    """Return True if *lexem* is an operator or punctuator."""
    return lexem in OPERATORS


def is_space(sym: str) -> bool:
    """Return True if *sym* is a whitespace character for the lexer."""
    return sym in SPACES