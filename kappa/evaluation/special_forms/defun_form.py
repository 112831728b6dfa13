import logging

from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaMalformedForm
from kappa.evaluation.special_forms.lambda_form import make_lambda
from kappa.types.cons import Cons
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


def defun_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (defun name (params...) body)
    Binds the new closure in the environment the form is evaluated in, so a
    top-level defun defines a global while a defun inside a function body only
    binds in that call's frame. Returns the name symbol.
    """
    if not isinstance(tail, Cons):
        raise KappaMalformedForm("defun requires a name, a parameter list and a body")

    name = tail.car
    if not isinstance(name, Symbol):
        raise KappaMalformedForm(f"function name must be a symbol, got {name!r}")

    fn = make_lambda("defun", tail.cdr, env)
    env.define(name, fn)
    logger.debug("defun %s with %d parameter(s)", name, len(fn.formals))
    return name
