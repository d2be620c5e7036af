"""Line-oriented C/C++ lexer driven by a small state machine."""

from __future__ import annotations

import re
import string
from typing import Callable

from pairedit.tokens import (
    BEGIN_COMMENT_BLOCK,
    DOT,
    NEXT_LINE,
    State,
    Token,
    is_keyword,
    is_operator,
    is_space,
)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER = re.compile(r"[0-9]+|[0-9]+[UuLl]?")
_FLOAT_NUMBER = re.compile(r"[0-9]+\.[0-9]+")
_SYMBOL_LITERAL = re.compile(r"'.'|'.+'", re.DOTALL)
_STRING_LITERAL = re.compile(r'".*"', re.DOTALL)
_LINE_COMMENT = re.compile(r"//.*", re.DOTALL)
_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*\*/")

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_QUOTES = frozenset("'\"")


def _is_identifier(lexem: str) -> bool:
    return _IDENTIFIER.fullmatch(lexem) is not None


def _is_number(lexem: str) -> bool:
    return _NUMBER.fullmatch(lexem) is not None


def _is_float_number(lexem: str) -> bool:
    return _FLOAT_NUMBER.fullmatch(lexem) is not None


def _is_literal(lexem: str) -> bool:
    return (_SYMBOL_LITERAL.fullmatch(lexem) is not None
            or _STRING_LITERAL.fullmatch(lexem) is not None)


def _is_line_comment(lexem: str) -> bool:
    return _LINE_COMMENT.fullmatch(lexem) is not None


def _is_block_comment(lexem: str) -> bool:
    return _BLOCK_COMMENT.fullmatch(lexem) is not None


def _is_lexem_end(sym: str) -> bool:
    return is_space(sym) or is_operator(sym) or sym in _QUOTES


class Lexer:
    """Splits one line of C/C++ code into tokens."""

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._was_running = False
        self._state = State.ST
        self._lexem = ""
        self._index = 0
        self._handlers: dict[State, Callable[[str], None]] = {
            State.ID: self._identifier,
            State.KW: self._keyword,
            State.NUM: self._number,
            State.FNUM: self._float_number,
            State.OPER: self._operator,
            State.COM: self._comment,
            State.LIT: self._literal,
            State.UNDEF: self._undefined,
        }

    @property
    def tokens(self) -> list[Token]:
        """Tokens found by the last analysis."""
        return list(self._tokens)

    @property
    def was_running(self) -> bool:
        """True once any analysis has been run."""
        return self._was_running

    @property
    def state(self) -> State:
        return self._state

    def clear(self) -> None:
        """Reset the automaton to its start state."""
        self._index = 0
        self._lexem = ""
        self._state = State.ST

    def lexical_analysis(self, code: str) -> list[Token]:
        """Tokenize *code*, store the result and return it."""
        self._was_running = True
        self._tokens = []
        self._index = 0
        end = len(code)
        while self._index < end:
            sym = code[self._index]
            self._index += 1
            if self._state is State.ST:
                if not is_space(sym):
                    self._start(sym)
            else:
                self._handlers[self._state](sym)
        if self._state is not State.ST:
            self._index += 1
            self._add_lexem()
        return list(self._tokens)

    def _add_lexem(self) -> None:
        # The terminating symbol is not consumed: it is read again in the start state.
        self._index -= 1
        self._tokens.append(
            Token(self._lexem, self._state, self._index - len(self._lexem), self._index)
        )
        self._lexem = ""
        self._state = State.ST

    def _change_state(self, state: State, sym: str) -> None:
        self._state = state
        self._lexem += sym

    def _start(self, sym: str) -> None:
        if sym in _LETTERS:
            self._change_state(State.ID, sym)
        elif sym in _DIGITS:
            self._change_state(State.NUM, sym)
        elif is_operator(sym):
            self._change_state(State.OPER, sym)
        elif sym in _QUOTES:
            self._change_state(State.LIT, sym)
        else:
            self._change_state(State.UNDEF, sym)

    def _identifier(self, sym: str) -> None:
        if _is_lexem_end(sym):
            self._add_lexem()
        elif _is_identifier(self._lexem + sym):
            self._lexem += sym
            if is_keyword(self._lexem):
                self._state = State.KW
        else:
            self._change_state(State.UNDEF, sym)

    def _keyword(self, sym: str) -> None:
        candidate = self._lexem + sym
        if _is_lexem_end(sym):
            self._add_lexem()
        elif is_keyword(candidate):
            self._lexem = candidate
        elif _is_identifier(candidate):
            self._change_state(State.ID, sym)
        else:
            self._change_state(State.UNDEF, sym)

    def _number(self, sym: str) -> None:
        if sym == DOT:
            self._change_state(State.FNUM, sym)
        elif _is_lexem_end(sym):
            self._add_lexem()
        elif _is_number(self._lexem + sym):
            self._lexem += sym
        else:
            self._change_state(State.UNDEF, sym)

    def _float_number(self, sym: str) -> None:
        if _is_lexem_end(sym):
            self._add_lexem()
        elif _is_float_number(self._lexem + sym):
            self._lexem += sym
        else:
            self._change_state(State.UNDEF, sym)

    def _operator(self, sym: str) -> None:
        candidate = self._lexem + sym
        if _is_line_comment(candidate) or candidate == BEGIN_COMMENT_BLOCK:
            self._change_state(State.COM, sym)
        elif is_space(sym) or not is_operator(candidate) or sym in _QUOTES:
            self._add_lexem()
        else:
            self._lexem = candidate

    def _comment(self, sym: str) -> None:
        if ((_is_line_comment(self._lexem) and sym == NEXT_LINE)
                or _is_block_comment(self._lexem)):
            self._add_lexem()
        else:
            self._lexem += sym

    def _undefined(self, sym: str) -> None:
        if _is_lexem_end(sym):
            self._add_lexem()
        else:
            self._lexem += sym

    def _literal(self, sym: str) -> None:
        if _is_literal(self._lexem) or sym == NEXT_LINE:
            self._add_lexem()
        else:
            self._lexem += sym


def tokenize(code: str) -> list[Token]:
    """Tokenize *code* with a fresh lexer."""
    return Lexer().lexical_analysis(code)