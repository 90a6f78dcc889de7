"""Lexer and reader turning program text into Cell trees."""

from tinylisp.reader.lexer import lex
from tinylisp.reader.parser import TokenStream, read_all

__all__ = ["lex", "TokenStream", "read_all"]
