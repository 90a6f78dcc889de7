"""Runtime environment for tinylisp.

An Environment is a flat mapping from symbol names to Cells. There is no
`outer` chain: name resolution is two-tier only (the local environment, then
the interpreter's global environment) and is done by the evaluator.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from tinylisp.types.cell import Cell


class Environment:
    """Mapping from symbol names to Cells."""

    __slots__ = ("vars",)

    def __init__(self, initial: Optional[dict[str, Cell]] = None):
        self.vars: dict[str, Cell] = dict(initial) if initial else {}

    def define(self, name: str, value: Cell) -> Cell:
        """Bind `name` to `value` in this frame, replacing any previous binding."""
        self.vars[name] = value
        return value

    def get(self, name: str) -> Optional[Cell]:
        """Return the Cell bound to `name`, or None when unbound here."""
        return self.vars.get(name)

    def update(self, mapping: dict[str, Cell]) -> None:
        """Bulk-define a mapping of name -> Cell."""
        self.vars.update(mapping)

    def clear(self) -> None:
        self.vars.clear()

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self} at 0x{id(self):x}>"
