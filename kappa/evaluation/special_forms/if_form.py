from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaMalformedForm
from kappa.types.cons import iter_chain
from kappa.types.environment import Environment
from kappa.types.nil import Nil, NilType


def is_true(value: LispValue) -> bool:
    """Lisp truthiness: only Nil and false are false; 0 and "" are true."""
    return not (isinstance(value, NilType) or value is False)


def if_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (if cond then [else])
    The else branch defaults to nil when omitted.
    """
    args = list(iter_chain(tail, "if argument list"))
    if len(args) < 2:
        raise KappaMalformedForm("if requires a condition and a then-expression")
    if len(args) > 3:
        raise KappaMalformedForm("if requires at most 3 arguments")

    cond = evaluate_fn(args[0], env)
    if is_true(cond):
        return evaluate_fn(args[1], env)
    if len(args) == 3:
        return evaluate_fn(args[2], env)
    return Nil
