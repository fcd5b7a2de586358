from __future__ import annotations

from pathlib import Path

from tinyscheme import LispValue
from tinyscheme.builtin.env_builtin import register
from tinyscheme.config import get_strict
from tinyscheme.errors import SchemeError, report
from tinyscheme.evaluation.evaluator import evaluate
from tinyscheme.modules.loader import eval_source, load_file
from tinyscheme.reader.parser import parse
from tinyscheme.runtime_context import set_strict
from tinyscheme.types.environment import Environment
from tinyscheme.types.nil import Nil


class Interpreter:
    """
    Owns the global environment and evaluates source text against it.
    Definitions persist across calls for the lifetime of the instance.

    `strict` overrides TINYSCHEME_STRICT for this instance and any created
    after it is dropped; leaving it as None restores the configured default.
    """

    def __init__(self, prelude: str | None = None, *, strict: bool | None = None):
        # strictness is process-wide; each new instance resets it
        set_strict(get_strict() if strict is None else strict)
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Lisp code for its definitions."""
        eval_source(code, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; returns the last value, or Nil."""
        return eval_source(code, self.env)

    def eval_one(self, code: str) -> LispValue:
        """Parse exactly one form from `code` and evaluate it."""
        expr = parse(code)
        if expr is None:
            return Nil
        return evaluate(expr, self.env)

    def load(self, path: str | Path) -> LispValue:
        """Evaluate a source file in the global environment."""
        try:
            return load_file(path, self.env)
        except SchemeError as err:
            return report(err)
