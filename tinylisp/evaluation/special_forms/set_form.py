from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.errors import ArityError
from tinylisp.types.cell import Cell
from tinylisp.types.environment import Environment

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter


def _unpack(tail: list[Cell], form: str) -> tuple[str, Cell]:
    if len(tail) != 2:
        raise ArityError(f"{form} requires exactly 2 arguments: ({form} name value)")
    var_sym, val_expr = tail
    return var_sym.symbol_name(f"{form} first argument"), val_expr


def set_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    """(set name value): bind in the local environment and return the value."""
    name, val_expr = _unpack(tail, "set")
    value = evaluate_fn(val_expr, env, interp)
    return env.define(name, value)


def setg_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    """(setg name value): like set, but always binds in the global environment."""
    name, val_expr = _unpack(tail, "setg")
    value = evaluate_fn(val_expr, env, interp)
    return interp.global_env.define(name, value)
