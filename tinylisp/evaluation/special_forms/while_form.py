from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.errors import ArityError
from tinylisp.types.cell import NULL, Cell
from tinylisp.types.environment import Environment

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter


def while_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    """(while cond body...): re-test cond before every pass; always returns Null."""
    if not tail:
        raise ArityError("while requires a condition")
    test_expr, *body = tail

    while evaluate_fn(test_expr, env, interp).as_bool("while condition"):
        for expr in body:
            evaluate_fn(expr, env, interp)
    return NULL
