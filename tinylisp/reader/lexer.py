"""
  tinylisp Lexer

- Streaming: tokens are produced lazily, left to right
- Tokens are plain strings:

    - "(" and ")"
    - string tokens keep both quote characters: "\"hi\""
    - every other run of non-whitespace, non-paren characters is one atom

- Whitespace separates tokens; ';' starts a comment running to end of line
- No escape-sequence processing: a backslash only stops the next quote from
  closing the string, and is kept verbatim in the token
"""

from __future__ import annotations

import re
from typing import Iterator

from tinylisp.errors import LexError


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*\n?)"  # line comment, newline included
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted string
    r'|(?P<open_string>")'  # a quote that never closes
    r"|(?P<atom>[^\s()]+)"  # numbers and symbols
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[str]:
    """Token generator: yields token strings until the source is exhausted."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            # only trailing whitespace is left
            break
        kind = m.lastgroup
        if kind is None:
            break
        if kind == "open_string":
            raise LexError("unterminated string", m.start(kind))
        pos = m.end()
        if kind == "comment":
            continue
        yield m.group(kind)
