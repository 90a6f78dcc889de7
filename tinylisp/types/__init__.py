"""Value model for tinylisp: cells, environments and procedures."""

from tinylisp.types.cell import (
    Cell,
    CellType,
    NULL,
    TRUE,
    FALSE,
    int_cell,
    float_cell,
    bool_cell,
    string_cell,
    list_cell,
    symbol_cell,
    proc_cell,
)
from tinylisp.types.environment import Environment

__all__ = [
    "Cell",
    "CellType",
    "NULL",
    "TRUE",
    "FALSE",
    "int_cell",
    "float_cell",
    "bool_cell",
    "string_cell",
    "list_cell",
    "symbol_cell",
    "proc_cell",
    "Environment",
]
