"""The Cell: tinylisp's single tagged value type.

A Cell pairs a CellType tag with one payload:

    - Int    -> int (kept inside the signed 64-bit range)
    - Float  -> float
    - Bool   -> bool
    - String -> str
    - List   -> list[Cell]
    - Proc   -> a callable taking list[Cell] and returning a Cell
    - Symbol -> no payload; the name lives in `name`
    - Null   -> no payload

Payloads are only read through the checked accessors (`as_int`, `as_list`, ...),
which raise TypeMismatch when the tag does not match.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

from tinylisp.errors import TypeMismatch

if TYPE_CHECKING:
    from tinylisp.types.closure import Closure
    from tinylisp.types.environment import Environment


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(n: int) -> int:
    """Two's-complement wrap of a Python int into the signed 64-bit range."""
    return ((n - INT64_MIN) % (1 << 64)) + INT64_MIN


class CellType(Enum):
    SYMBOL = "Symbol"
    INT = "Int"
    FLOAT = "Float"
    BOOL = "Bool"
    STRING = "String"
    LIST = "List"
    PROC = "Proc"
    NULL = "Null"

    def __str__(self) -> str:
        return self.value


SELF_EVALUATING = frozenset(
    {CellType.INT, CellType.FLOAT, CellType.BOOL, CellType.STRING, CellType.NULL}
)


class Cell:
    __slots__ = ("type", "value", "name", "env")

    def __init__(
        self,
        type: CellType = CellType.NULL,
        value: Any = None,
        name: Optional[str] = None,
        env: Optional[Environment] = None,
    ):
        self.type: CellType = type
        self.value: Any = value
        # Symbol name, or the registered name of a Proc
        self.name: Optional[str] = name
        # Attached local environment of a user-defined function
        self.env: Optional[Environment] = env

    # --- Checked accessors ---
    def _mismatch(self, expected: str, what: str) -> TypeMismatch:
        prefix = f"{what}: " if what else ""
        return TypeMismatch(f"{prefix}expected {expected}, got {self.type}")

    def as_int(self, what: str = "") -> int:
        if self.type is CellType.INT:
            return self.value
        raise self._mismatch("Int", what)

    def as_float(self, what: str = "") -> float:
        if self.type is CellType.FLOAT:
            return self.value
        raise self._mismatch("Float", what)

    def as_number(self, what: str = "") -> int | float:
        """Int or Float payload; anything else is a TypeMismatch."""
        if self.type is CellType.INT or self.type is CellType.FLOAT:
            return self.value
        raise self._mismatch("Int or Float", what)

    def as_bool(self, what: str = "") -> bool:
        if self.type is CellType.BOOL:
            return self.value
        raise self._mismatch("Bool", what)

    def as_str(self, what: str = "") -> str:
        if self.type is CellType.STRING:
            return self.value
        raise self._mismatch("String", what)

    def as_list(self, what: str = "") -> list[Cell]:
        if self.type is CellType.LIST:
            return self.value
        raise self._mismatch("List", what)

    def as_proc(self, what: str = "") -> Callable[[list[Cell]], Cell] | Closure:
        if self.type is CellType.PROC:
            return self.value
        raise self._mismatch("Proc", what)

    def symbol_name(self, what: str = "") -> str:
        if self.type is CellType.SYMBOL:
            return self.name
        raise self._mismatch("Symbol", what)

    # --- Predicates ---
    @property
    def is_number(self) -> bool:
        return self.type is CellType.INT or self.type is CellType.FLOAT

    @property
    def is_null(self) -> bool:
        return self.type is CellType.NULL

    # --- Structural equality ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        if self.type is not other.type:
            return False
        match self.type:
            case CellType.NULL:
                return True
            case CellType.SYMBOL:
                return self.name == other.name
            case CellType.PROC:
                return self.value is other.value
            case CellType.LIST:
                return len(self.value) == len(other.value) and all(
                    a == b for a, b in zip(self.value, other.value)
                )
            case CellType.INT | CellType.FLOAT | CellType.BOOL | CellType.STRING:
                return self.value == other.value
        raise TypeMismatch(f"unknown cell type {self.type!r}")

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        match self.type:
            case CellType.NULL:
                return "Cell(Null)"
            case CellType.SYMBOL:
                return f"Cell(Symbol, {self.name!r})"
            case CellType.PROC:
                return f"Cell(Proc, {self.name!r})"
            case _:
                return f"Cell({self.type}, {self.value!r})"


# Shared immutable constants
NULL = Cell(CellType.NULL)
TRUE = Cell(CellType.BOOL, True)
FALSE = Cell(CellType.BOOL, False)


def int_cell(n: int) -> Cell:
    return Cell(CellType.INT, wrap_int64(n))


def float_cell(x: float) -> Cell:
    return Cell(CellType.FLOAT, float(x))


def bool_cell(b: bool) -> Cell:
    return TRUE if b else FALSE


def string_cell(s: str) -> Cell:
    return Cell(CellType.STRING, s)


def list_cell(items: list[Cell] | None = None) -> Cell:
    return Cell(CellType.LIST, list(items) if items is not None else [])


def symbol_cell(name: str) -> Cell:
    return Cell(CellType.SYMBOL, name=name)


def proc_cell(
    fn: Callable[[list[Cell]], Cell] | Closure, name: str, env: Optional[Environment] = None
) -> Cell:
    return Cell(CellType.PROC, fn, name=name, env=env)
