from __future__ import annotations

import logging
from typing import Iterator, Optional

from tinylisp.builtin.env_builtin import register
from tinylisp.config import get_max_depth, get_shared_frames
from tinylisp.errors import TinyLispError
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.modules.loader import FileLoader, Loader
from tinylisp.output import StreamWriter, Writer
from tinylisp.printer import to_source
from tinylisp.reader.lexer import lex
from tinylisp.reader.parser import TokenStream
from tinylisp.types.cell import NULL, Cell
from tinylisp.types.environment import Environment

_log = logging.getLogger(__name__)


class Interpreter:
    """
    One tinylisp session: reads and evaluates program text against a global
    environment that persists across calls.

    Each Interpreter owns its global environment, the set of imported file
    names and its diagnostics, so independent sessions share no state. The
    output writer and the file loader are supplied by the host; by default
    output goes to stdout and imports are read from the TINYLISP_PATH roots.
    """

    def __init__(
        self,
        output: Optional[Writer] = None,
        loader: Optional[Loader] = None,
        *,
        max_depth: Optional[int] = None,
        shared_frames: Optional[bool] = None,
    ):
        self.output: Writer = output if output is not None else StreamWriter()
        self.loader: Loader = loader if loader is not None else FileLoader()
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        self.shared_frames: bool = (
            shared_frames if shared_frames is not None else get_shared_frames()
        )

        self.global_env: Environment = Environment()
        register(self.global_env, self.output)

        self.loaded: set[str] = set()
        self.diagnostics: list[TinyLispError] = []
        self.depth: int = 0

    # --- Diagnostics ---
    def report(self, diagnostic: TinyLispError) -> None:
        """Record a recoverable diagnostic; evaluation carries on."""
        _log.warning("%s: %s", type(diagnostic).__name__, diagnostic)
        self.diagnostics.append(diagnostic)

    # --- Reading ---
    def forms(self, source: str) -> Iterator[Cell]:
        """
        Read the top-level forms of `source` one at a time.

        The whole source is tokenized first, so a LexError anywhere in it is
        raised before any form is read or evaluated.
        """
        return TokenStream(list(lex(source))).parse_all()

    def read(self, source: str) -> list[Cell]:
        return list(self.forms(source))

    # --- Evaluation ---
    def evaluate(self, expr: Cell, env: Optional[Environment] = None) -> Cell:
        """Evaluate one already-read form, at top level by default."""
        return evaluate(expr, env if env is not None else self.global_env, self)

    def eval_forms(self, source: str, env: Environment) -> Cell:
        """Read and evaluate each top-level form of `source` in `env`; the last value wins."""
        result = NULL
        for expr in self.forms(source):
            if _log.isEnabledFor(logging.DEBUG):
                _log.debug("eval: %s", to_source(expr))
            result = evaluate(expr, env, self)
        return result

    def eval_program(self, source: str, *, keep_going: bool = False) -> Cell:
        """
        Evaluate a whole source unit against the global environment and return
        the value of its last top-level form (Null when there is none).

        With `keep_going`, an evaluation error in one top-level form is recorded
        as a diagnostic and the next form runs; the value of the failed form is
        Null. Lexical and parse errors in `source` itself still stop the program,
        since the rest of the token stream can no longer be trusted.
        """
        if not keep_going:
            return self.eval_forms(source, self.global_env)

        result = NULL
        for expr in self.forms(source):
            try:
                result = evaluate(expr, self.global_env, self)
            except TinyLispError as e:
                self.report(e)
                result = NULL
        return result
