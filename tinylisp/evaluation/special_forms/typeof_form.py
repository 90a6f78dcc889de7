from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.errors import ArityError
from tinylisp.evaluation.scope import lookup
from tinylisp.printer import type_name
from tinylisp.types.cell import Cell, CellType, list_cell, string_cell
from tinylisp.types.environment import Environment

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter


def typeof_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    """
    (typeof operand...)

    A bare symbol reports the type of the value it currently resolves to; any
    other operand reports the type of its own literal form, unevaluated, so
    (typeof (+ 1 2)) is "List". One operand gives a String, several give a
    List of Strings.
    """
    if not tail:
        raise ArityError("typeof requires at least one operand")

    names = []
    for operand in tail:
        if operand.type is CellType.SYMBOL:
            operand = lookup(operand.name, env, interp.global_env)
        names.append(string_cell(type_name(operand)))

    if len(names) == 1:
        return names[0]
    return list_cell(names)
