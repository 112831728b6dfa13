"""Application engine for Kappa.

Centralizes function application so the evaluator and any future caller share
one set of rules:
- Builtins receive the evaluated argument list and enforce their own arity/types.
- Lambdas require an exact argument count and evaluate their body in a fresh
  frame chained to the environment they captured (static scoping), never the
  caller's.
"""

from __future__ import annotations

import logging

from kappa import LispValue, EvaluatorFn
from kappa.errors import KappaNotCallable
from kappa.printer import to_text
from kappa.types.builtin_fn import BuiltinFunction
from kappa.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value.

    Raises KappaArityError when `args` does not match the formal parameters.
    """
    new_env = fn.extend_env(args)
    logger.debug("apply %r to %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, new_env)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Lambda or a BuiltinFunction; anything else is not callable."""
    match head:
        case BuiltinFunction():
            return head(args)
        case Lambda():
            return apply_lambda(head, args, evaluate_fn)
    raise KappaNotCallable(f"not a function: {to_text(head)}")
