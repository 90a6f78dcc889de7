"""File-loading collaborators used by the `import` special form.

A loader maps a logical file name to its source text. Which names have already
been loaded is tracked by the Interpreter, not by the loader.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Protocol

from tinylisp.config import get_search_roots
from tinylisp.errors import UnresolvedImport

_log = logging.getLogger(__name__)


class Loader(Protocol):
    def load(self, name: str) -> str: ...


class FileLoader:
    """Reads files from disk, resolving relative names against search roots."""

    def __init__(self, roots: Optional[Iterable[Path]] = None, encoding: str = "utf-8"):
        self.roots: list[Path] = (
            [Path(r) for r in roots] if roots is not None else get_search_roots()
        )
        self.encoding = encoding

    def resolve(self, name: str) -> Optional[Path]:
        p = Path(name)
        if p.is_absolute():
            return p if p.is_file() else None
        for root in self.roots:
            candidate = root / p
            if candidate.is_file():
                return candidate
        return None

    def load(self, name: str) -> str:
        path = self.resolve(name)
        if path is None:
            raise UnresolvedImport(
                f"cannot find {name!r} in {', '.join(str(r) for r in self.roots) or '<no roots>'}"
            )
        _log.debug("loading %s from %s", name, path)
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise UnresolvedImport(f"cannot read {name!r}: {e}") from e


class MemoryLoader:
    """Serves source text from an in-memory mapping of name -> text."""

    def __init__(self, files: Optional[Mapping[str, str]] = None):
        self.files: dict[str, str] = dict(files) if files else {}

    def add(self, name: str, text: str) -> None:
        self.files[name] = text

    def load(self, name: str) -> str:
        try:
            return self.files[name]
        except KeyError:
            raise UnresolvedImport(f"no source registered for {name!r}") from None
