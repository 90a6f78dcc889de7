"""Application engine for tinylisp.

Builtins are plain Python callables taking the evaluated argument list.
Closures bind their parameters into a local environment (see
Closure.extend_env) and evaluate their body forms there, returning the value
of the last one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.types.cell import NULL, Cell
from tinylisp.types.closure import Closure

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter

_log = logging.getLogger(__name__)


def apply_closure(
    fn: Closure, args: list[Cell], interp: Interpreter, evaluate_fn: EvaluatorFn
) -> Cell:
    local_env = fn.extend_env(args)
    _log.debug("call %s with %d argument(s)", fn.name, len(args))
    result = NULL
    for form in fn.body:
        result = evaluate_fn(form, local_env, interp)
    return result


def apply(
    proc: Cell, args: list[Cell], interp: Interpreter, evaluate_fn: EvaluatorFn
) -> Cell:
    """Apply a Proc cell to already-evaluated arguments.

    Raises TypeMismatch if `proc` is not a Proc.
    """
    fn = proc.as_proc(f"call of {proc.name or proc.type}")
    if isinstance(fn, Closure):
        return apply_closure(fn, args, interp, evaluate_fn)
    return fn(args)
