"""
  tinylisp Reader

Builds Cells from the token stream, one top-level form per call:

    - "(" ... ")"        -> List cell (empty "()" is an empty List)
    - 1, -1, .5, -.5     -> Int cell, or Float cell when the token has a '.'
    - "\"...\""          -> String cell, quotes stripped
    - anything else      -> Symbol cell (true, false, null and the special
                            form names are ordinary symbols here)

Tokens are consumed destructively, so the remaining tokens stay available for
the next top-level read.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from tinylisp.errors import ParseError, ParseErrorKind
from tinylisp.reader.lexer import lex
from tinylisp.types.cell import (
    Cell,
    INT64_MAX,
    INT64_MIN,
    float_cell,
    int_cell,
    list_cell,
    string_cell,
    symbol_cell,
)


INT_RE = re.compile(r"-?[0-9]+\Z")
FLOAT_RE = re.compile(r"-?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?\Z")
NUMBER_START_RE = re.compile(r"-?\.?[0-9]")


def is_number_token(tok: str) -> bool:
    # 1, -1, .5 and -.5 start a number; "-", "." and "-x" are symbols
    return NUMBER_START_RE.match(tok) is not None


def read_number(tok: str) -> Cell:
    if "." in tok:
        if not FLOAT_RE.match(tok):
            raise ParseError(ParseErrorKind.INVALID_NUMBER, tok)
        return float_cell(float(tok))
    if not INT_RE.match(tok):
        raise ParseError(ParseErrorKind.INVALID_NUMBER, tok)
    n = int(tok)
    if not INT64_MIN <= n <= INT64_MAX:
        raise ParseError(ParseErrorKind.INVALID_NUMBER, tok)
    return int_cell(n)


def read_atom(tok: str) -> Cell:
    if is_number_token(tok):
        return read_number(tok)
    if tok[0] == '"':
        return string_cell(tok[1:-1])
    return symbol_cell(tok)


class TokenStream:
    def __init__(self, token_iter: Iterable[str]):
        self.tokens: Iterator[str] = iter(token_iter)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[str]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> Optional[Cell]:
        """Read one form; None when the stream is exhausted."""
        tok = self.advance()
        if tok is None:
            return None
        return self._read_from(tok)

    def _read_from(self, tok: str) -> Cell:
        # Open lists are kept on an explicit stack, so nesting depth is not
        # bounded by the Python call stack
        open_lists: list[list[Cell]] = []
        while True:
            if tok == "(":
                open_lists.append([])
            else:
                if tok == ")":
                    if not open_lists:
                        raise ParseError(ParseErrorKind.UNMATCHED_PAREN, tok)
                    cell = list_cell(open_lists.pop())
                else:
                    cell = read_atom(tok)
                if not open_lists:
                    return cell
                open_lists[-1].append(cell)

            tok = self.advance()
            if tok is None:
                raise ParseError(ParseErrorKind.UNEXPECTED_EOF)

    def parse_all(self) -> Iterator[Cell]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def read_all(source: str) -> list[Cell]:
    """Lex and read every top-level form of `source`."""
    return list(TokenStream(lex(source)).parse_all())
