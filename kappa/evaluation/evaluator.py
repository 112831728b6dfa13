"""Core evaluator for the Kappa interpreter.

A plain recursive tree walk: self-evaluating atoms, symbol lookup, special-form
dispatch and function application. There is no tail-call elimination, so
Python's recursion limit bounds how deeply programs may nest or recurse.
"""

from __future__ import annotations

import logging

from kappa import SExpression, LispValue
from kappa.errors import KappaError
from kappa.evaluation.apply import apply
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.types.builtin_fn import BuiltinFunction
from kappa.types.cons import Cons, iter_chain
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import NilType
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        # --- Atoms return as-is ---
        case bool() | float() | int() | str() | NilType():
            return expr

        case Symbol():
            return env.lookup(expr)

        case Cons(car=head, cdr=tail):
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                logger.debug("special form %s", head)
                return SPECIAL_FORMS[head](tail, env, evaluate)

            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in iter_chain(tail, "argument list")]
            return apply(fn, args, evaluate)

        # Callables spliced into a form programmatically evaluate to themselves
        case Lambda() | BuiltinFunction():
            return expr

    raise KappaError(f"unknown expression type: {type(expr).__name__}")
