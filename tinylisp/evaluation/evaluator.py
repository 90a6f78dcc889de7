"""Core evaluator for tinylisp.

Dispatch order for a Cell:

1. Int, Float, Bool, String and Null evaluate to themselves.
2. A Symbol is looked up in the local environment, then in the global one.
   An unbound symbol evaluates to Null without any diagnostic.
3. A List evaluates to Null when empty. A head naming a special form is
   handed the unevaluated tail. Otherwise the head must evaluate to a Proc;
   the arguments are evaluated left to right and the procedure applied. A head
   that is not a Proc is recorded as an UndefinedProcedure diagnostic and the
   call evaluates to Null.

Evaluation recurses on the Python stack. `evaluate` keeps a depth count on the
interpreter and turns both its own limit and RecursionError into StackOverflow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp.errors import StackOverflow, UndefinedProcedure
from tinylisp.printer import to_source
from tinylisp.types.cell import NULL, SELF_EVALUATING, Cell, CellType
from tinylisp.types.environment import Environment
from tinylisp.evaluation.apply import apply
from tinylisp.evaluation.scope import lookup
from tinylisp.evaluation.special_forms import SPECIAL_FORMS

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter


def evaluate(expr: Cell, env: Environment, interp: Interpreter) -> Cell:
    """
    Depth-guarded evaluation entry point used by every recursive call.
    """
    interp.depth += 1
    try:
        if interp.depth > interp.max_depth:
            raise StackOverflow(f"evaluation nested deeper than {interp.max_depth} levels")
        return evaluate0(expr, env, interp)
    except RecursionError:
        if interp.depth > 1:
            raise
        raise StackOverflow("Python recursion limit reached during evaluation") from None
    finally:
        interp.depth -= 1


def evaluate0(expr: Cell, env: Environment, interp: Interpreter) -> Cell:
    """
    Single evaluation step, without depth bookkeeping.
    """
    match expr.type:
        case CellType.SYMBOL:
            return lookup(expr.name, env, interp.global_env)
        case CellType.LIST:
            return evaluate_list(expr.value, env, interp)
        case t if t in SELF_EVALUATING:
            return expr
    # Procs only reach here as values already produced by evaluation
    return expr


def evaluate_list(items: list[Cell], env: Environment, interp: Interpreter) -> Cell:
    if not items:
        return NULL

    head, *tail = items
    if head.type is CellType.SYMBOL:
        form = SPECIAL_FORMS.get(head.name)
        if form is not None:
            return form(tail, env, interp, evaluate)

    proc = evaluate(head, env, interp)
    if proc.type is not CellType.PROC:
        name = head.name if head.type is CellType.SYMBOL else to_source(head)
        interp.report(UndefinedProcedure(name))
        return NULL

    args = [evaluate(arg, env, interp) for arg in tail]
    return apply(proc, args, interp, evaluate)
