from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.errors import ArityError
from tinylisp.types.cell import Cell
from tinylisp.types.environment import Environment

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter


def eval_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    """(eval string): read and evaluate every form in the string in the current environment."""
    if len(tail) != 1:
        raise ArityError("eval expects exactly one argument")
    source = evaluate_fn(tail[0], env, interp).as_str("eval argument")
    return interp.eval_forms(source, env)
