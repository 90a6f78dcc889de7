"""User-defined function representation and argument binding for tinylisp."""

from __future__ import annotations

from io import StringIO

from tinylisp.errors import ArityError
from tinylisp.types.cell import Cell
from tinylisp.types.environment import Environment


class Closure:
    """A function built by `defun`: parameter names, body forms and a local frame.

    `frame` is the function's own local environment, created once at `defun`
    time. With `shared_frame` set, every call clears and rebinds that single
    frame (the legacy behaviour, where recursive calls see each other's
    bindings). Otherwise each call binds into a fresh Environment.
    """

    __slots__ = ("name", "params", "body", "frame", "shared_frame")

    def __init__(
        self,
        name: str,
        params: list[str],
        body: list[Cell],
        shared_frame: bool = False,
    ):
        self.name: str = name
        self.params: list[str] = params
        self.body: list[Cell] = body
        self.frame: Environment = Environment()
        self.shared_frame: bool = shared_frame

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(defun ")
            buffer.write(self.name)
            buffer.write(" (")
            buffer.write(" ".join(self.params))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self.name} ({' '.join(self.params)})>"

    def extend_env(self, args: list[Cell]) -> Environment:
        """Bind `args` to the parameters and return the environment for the body.

        Raises ArityError when fewer arguments than parameters are supplied.
        Surplus arguments are ignored.
        """
        if len(args) < len(self.params):
            raise ArityError(
                f"{self.name} expects {len(self.params)} argument(s), got {len(args)}"
            )
        if self.shared_frame:
            env = self.frame
            env.clear()
        else:
            env = Environment()
        for param, arg in zip(self.params, args):
            env.define(param, arg)
        return env
