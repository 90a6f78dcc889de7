"""Two-tier name resolution shared by the evaluator and the special forms."""

from __future__ import annotations

from tinylisp.types.cell import NULL, Cell
from tinylisp.types.environment import Environment


def lookup(name: str, env: Environment, global_env: Environment) -> Cell:
    """Local environment first, then global; Null when the name is unbound."""
    value = env.get(name)
    if value is None:
        value = global_env.get(name)
    return value if value is not None else NULL
