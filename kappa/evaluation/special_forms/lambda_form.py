from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaMalformedForm
from kappa.types.cons import iter_chain
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.symbol import Symbol


def parse_params(params: SExpression) -> list[Symbol]:
    """Validate a parameter list: a proper list (possibly empty) of symbols."""
    formals = []
    for param in iter_chain(params, "parameter list"):
        if not isinstance(param, Symbol):
            raise KappaMalformedForm(f"parameter must be a symbol, got {param!r}")
        formals.append(param)
    return formals


def make_lambda(form: str, tail: SExpression, env: Environment) -> Lambda:
    """Build a closure over `env` from the chain (params body)."""
    parts = list(iter_chain(tail, f"{form} form"))
    if len(parts) < 2:
        raise KappaMalformedForm(f"{form} requires a parameter list and a body")
    if len(parts) > 2:
        raise KappaMalformedForm(f"{form} body must be a single expression")
    params, body = parts
    return Lambda(parse_params(params), body, env)


def lambda_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda (params...) body): the body is not evaluated until application
    return make_lambda("lambda", tail, env)
