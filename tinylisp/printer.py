"""Rendering of Cells as text.

- `to_string`: the display form used by print, println, strcat, format and
  diagnostics. Lists render as "( 1, 2, 3 )", Floats in six-decimal fixed
  point, Bools as true/false, Null as "Null", Procs by their registered name.
- `to_source`: a form the reader accepts again. Strings keep their quotes and
  Lists use plain parenthesised notation.
"""

from __future__ import annotations

from io import StringIO

from tinylisp.types.cell import Cell, CellType


def type_name(cell: Cell) -> str:
    return cell.type.value


def _write_display(cell: Cell, buffer: StringIO) -> None:
    match cell.type:
        case CellType.INT:
            buffer.write(str(cell.value))
        case CellType.FLOAT:
            buffer.write(f"{cell.value:f}")
        case CellType.BOOL:
            buffer.write("true" if cell.value else "false")
        case CellType.STRING:
            buffer.write(cell.value)
        case CellType.NULL:
            buffer.write("Null")
        case CellType.SYMBOL | CellType.PROC:
            buffer.write(cell.name or "")
        case CellType.LIST:
            buffer.write("( ")
            for i, item in enumerate(cell.value):
                if i:
                    buffer.write(", ")
                _write_display(item, buffer)
            buffer.write(" )")


def to_string(cell: Cell) -> str:
    with StringIO() as buffer:
        _write_display(cell, buffer)
        return buffer.getvalue()


def _write_source(cell: Cell, buffer: StringIO) -> None:
    match cell.type:
        case CellType.INT:
            buffer.write(str(cell.value))
        case CellType.FLOAT:
            text = repr(cell.value)
            # keep the dot so the reader produces a Float again
            if "." not in text:
                mantissa, _, exponent = text.partition("e")
                text = f"{mantissa}.0" + (f"e{exponent}" if exponent else "")
            buffer.write(text)
        case CellType.BOOL:
            buffer.write("true" if cell.value else "false")
        case CellType.STRING:
            buffer.write(f'"{cell.value}"')
        case CellType.NULL:
            buffer.write("null")
        case CellType.SYMBOL | CellType.PROC:
            buffer.write(cell.name or "")
        case CellType.LIST:
            buffer.write("(")
            buffer.write(" ".join(to_source(item) for item in cell.value))
            buffer.write(")")


def to_source(cell: Cell) -> str:
    with StringIO() as buffer:
        _write_source(cell, buffer)
        return buffer.getvalue()
