from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tinylisp import EvaluatorFn
from tinylisp.errors import ArityError
from tinylisp.types.cell import NULL, Cell
from tinylisp.types.environment import Environment

if TYPE_CHECKING:
    from tinylisp.interpreter import Interpreter

_log = logging.getLogger(__name__)


def import_form(
    tail: list[Cell],
    env: Environment,
    interp: Interpreter,
    evaluate_fn: EvaluatorFn,
) -> Cell:
    """
    Usage:
        (import "file-name")

    Loads the file through the interpreter's loader and evaluates it against
    the global environment, once per file name and interpreter.
    """
    if len(tail) != 1:
        raise ArityError("import requires exactly one string literal")
    name = tail[0].as_str("import file name")

    if name in interp.loaded:
        _log.debug("skipping %s: already imported", name)
        return NULL

    source = interp.loader.load(name)
    # Recorded before evaluation so that files importing each other terminate
    interp.loaded.add(name)
    _log.debug("importing %s", name)
    interp.eval_forms(source, interp.global_env)
    return NULL
