"""Kappa data model: symbols, Nil, cons cells, environments and callables."""

from kappa.types.symbol import Symbol
from kappa.types.nil import Nil, NilType
from kappa.types.cons import Cons, iter_chain
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.builtin_fn import BuiltinFunction

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Cons",
    "iter_chain",
    "Environment",
    "Lambda",
    "BuiltinFunction",
]
