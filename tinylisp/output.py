"""Output collaborators: where print, println and format send their text."""

from __future__ import annotations

import sys
from io import StringIO
from typing import Optional, Protocol, TextIO


class Writer(Protocol):
    def write(self, text: str) -> None: ...


class StreamWriter:
    """Writes to a text stream, `sys.stdout` by default (looked up at write time)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)
        stream.flush()


class BufferWriter:
    """Collects output in memory."""

    def __init__(self):
        self._buffer = StringIO()

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def clear(self) -> None:
        self._buffer = StringIO()
