"""Lambda function representation for Kappa."""

from __future__ import annotations

from kappa import SExpression, LispValue
from kappa.errors import KappaArityError
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        return "#<FUNCTION>"

    def __repr__(self) -> str:
        params = " ".join(str(f) for f in self.formals)
        return f"<Lambda ({params})>"

    # --- Evaluation helpers ---
    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment, chained to the captured one, for evaluating
        the body.
        """
        if len(args) != len(self.formals):
            raise KappaArityError(
                f"function expects {len(self.formals)} argument(s), got {len(args)}"
            )
        new_env = Environment(outer=self.env)
        for formal, arg in zip(self.formals, args):
            new_env.define(formal, arg)
        return new_env
