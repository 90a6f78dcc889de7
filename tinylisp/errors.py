from __future__ import annotations

from enum import Enum


class TinyLispError(Exception):
    """ Base class for all tinylisp errors"""
    pass


class LexError(TinyLispError):
    """ Raised when the source text cannot be split into tokens"""

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} at offset {position}"
        super().__init__(message)
        self.position = position


class ParseErrorKind(Enum):
    UNEXPECTED_EOF = "unexpected end of input"
    UNMATCHED_PAREN = "unmatched ')'"
    INVALID_NUMBER = "invalid number literal"


class ParseError(TinyLispError):
    """ Raised when the token sequence does not form a valid expression"""

    def __init__(self, kind: ParseErrorKind, token: str | None = None):
        message = kind.value if token is None else f"{kind.value}: {token!r}"
        super().__init__(message)
        self.kind = kind
        self.token = token


class UndefinedProcedure(TinyLispError):
    """ Recorded when a call head does not resolve to a procedure"""

    def __init__(self, name: str):
        super().__init__(f"symbol {name} undefined")
        self.name = name


class TypeMismatch(TinyLispError):
    """ Raised when an operand has the wrong dynamic type"""


class DivisionByZero(TinyLispError):
    """ Raised on integer division or modulo by zero"""


class IndexOutOfRange(TinyLispError):
    """ Raised when a list index is outside the list"""


class ArityError(TinyLispError):
    """ Raised when a procedure or special form receives too few (or too many) arguments"""


class UnresolvedImport(TinyLispError):
    """ Raised when the loader cannot supply the named file"""


class StackOverflow(TinyLispError):
    """ Raised when evaluation nests deeper than the interpreter allows"""
