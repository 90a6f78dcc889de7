from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.errors import ArityError
from tinylisp.types.cell import Cell, proc_cell
from tinylisp.types.closure import Closure
from tinylisp.types.environment import Environment

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter


def defun_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    """
    (defun name (params...) body...)

    Binds the new function under `name` in the current environment and
    returns it. A function with no body forms returns Null when called.
    """
    if len(tail) < 2:
        raise ArityError("defun requires a name and a parameter list")

    name = tail[0].symbol_name("defun name")
    params = [p.symbol_name(f"parameter of {name}") for p in tail[1].as_list(f"parameter list of {name}")]
    body = list(tail[2:])

    fn = Closure(name, params, body, shared_frame=interp.shared_frames)
    return env.define(name, proc_cell(fn, name, env=fn.frame))
