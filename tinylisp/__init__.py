# Core type aliases for tinylisp.
#
# Every parsed form and every runtime value is a Cell (see tinylisp.types.cell).
# The aliases below name the callable shapes shared by the evaluator, the
# special forms and the builtin library.

from typing import Any, Callable

# Evaluator function type: (cell, env, interpreter) -> Cell
EvaluatorFn = Callable[..., Any]

# Special form handler type: (tail, env, interpreter, evaluate_fn) -> Cell
SpecialFormFn = Callable[..., Any]

__version__ = "0.3.0"
