from kappa import SExpression, LispValue, EvaluatorFn
from kappa.errors import KappaMalformedForm
from kappa.types.cons import Cons
from kappa.types.environment import Environment
from kappa.types.nil import Nil


def quote_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (quote x) arrives as the chain (x), i.e. Cons(x, Nil)
    if not isinstance(tail, Cons) or tail.cdr is not Nil:
        raise KappaMalformedForm("quote requires exactly 1 argument")
    return tail.car
