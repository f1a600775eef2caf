from __future__ import annotations

import logging
from pathlib import Path

from lispc.errors import LispcSyntaxError
from lispc.types.environment import Environment
from lispc.types.value import Error, Value
from lispc.reader.grammar import parse
from lispc.reader.reader import read
from lispc.evaluation.evaluator import evaluate
from lispc.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates lispc source against one session Environment.
    Definitions made with `def` persist across calls to `eval`.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def read(self, code: str, filename: str = "<stdin>") -> Value:
        """Parse and read `code` into a root S-Expression without evaluating it."""
        tree = parse(code, filename)
        try:
            return read(tree)
        except RecursionError:
            raise LispcSyntaxError("expression nested too deeply", filename) from None

    def _evaluate(self, v: Value, filename: str) -> Value:
        try:
            return evaluate(self.env, v)
        except RecursionError:
            raise LispcSyntaxError("expression nested too deeply", filename) from None

    def eval(self, code: str) -> Value:
        """Evaluate a line of source as a single expression and return the result."""
        logger.debug(f"Evaluating {code!r}")
        return self._evaluate(self.read(code), "<stdin>")

    def eval_prelude(self, code: str, filename: str = "<prelude>") -> list[Value]:
        """Evaluate each top-level expression of `code` on its own."""
        root = self.read(code, filename)
        results: list[Value] = []
        while len(root):
            result = self._evaluate(root.pop(0), filename)
            if isinstance(result, Error):
                logger.warning(f"{filename}: {result}")
            results.append(result)
        root.release()
        return results

    def load_file(self, path: Path) -> list[Value]:
        logger.debug(f"Loading {path}")
        return self.eval_prelude(path.read_text(encoding="utf-8"), str(path))

    def reset(self) -> None:
        """Drop every user definition, keeping only the builtins."""
        self.env.release()
        register(self.env)


__all__ = ("Interpreter",)
