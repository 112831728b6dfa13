from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from kappa import LispValue
from kappa.builtins import new_global_environment
from kappa.config import get_prelude_paths
from kappa.evaluation.evaluator import evaluate
from kappa.reader.parser import parse_all
from kappa.types.environment import Environment
from kappa.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Kappa code.
    Maintains one global Environment across calls; separate instances share nothing.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = new_global_environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            for path in get_prelude_paths():
                if not path.is_file():
                    logger.debug("prelude %s not found, skipping", path)
                    continue
                logger.info("loading prelude %s", path)
                self.eval_prelude(path.read_text(encoding='utf-8'))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in parse_all(code):
            evaluate(expr, self.env)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level expression in `code` and return all results.

        Expressions run in order; the first error stops the rest, but bindings
        made by the expressions before it are kept.
        """
        results: list[LispValue] = []
        for expr in parse_all(code):
            results.append(evaluate(expr, self.env))
        logger.debug("evaluated %d expression(s)", len(results))
        return results

    def eval(self, code: str) -> LispValue:
        results = self.eval_all(code)
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def eval_file(self, path: str | Path) -> LispValue:
        return self.eval(Path(path).read_text(encoding='utf-8'))
