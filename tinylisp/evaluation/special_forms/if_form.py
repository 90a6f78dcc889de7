from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.errors import ArityError
from tinylisp.types.cell import NULL, Cell
from tinylisp.types.environment import Environment

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter


def if_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    if len(tail) not in (2, 3):
        raise ArityError("if requires a condition, a then-expression and an optional else-expression")

    # No truthiness: the condition must be a Bool
    cond = evaluate_fn(tail[0], env, interp).as_bool("if condition")

    if cond:
        return evaluate_fn(tail[1], env, interp)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, interp)
    else:
        return NULL
