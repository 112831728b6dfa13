from __future__ import annotations

from typing import Sequence

from kappa import LispValue
from kappa.errors import KappaArityError, KappaDivisionByZero, KappaTypeError
from kappa.types.builtin_fn import BuiltinFunction, NativeFn
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol


def _number(name: str, arg: LispValue) -> float:
    """Check `arg` is a number (T is not) and return it as a float."""
    if isinstance(arg, bool) or not isinstance(arg, (int, float)):
        raise KappaTypeError(f"{name} expects numbers, got {type(arg).__name__}")
    return float(arg)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[LispValue]) -> float:
    result = 0.0
    for arg in args:
        result += _number("+", arg)
    return result


def sub(args: Sequence[LispValue]) -> float:
    if not args:
        raise KappaArityError("- requires at least 1 argument")
    result = _number("-", args[0])
    if len(args) == 1:
        return -result
    for arg in args[1:]:
        result -= _number("-", arg)
    return result


def mul(args: Sequence[LispValue]) -> float:
    result = 1.0
    for arg in args:
        result *= _number("*", arg)
    return result


def div(args: Sequence[LispValue]) -> float:
    # each divisor is checked as the fold reaches it, so (/ 10 0 "x") is a division by zero
    if not args:
        raise KappaArityError("/ requires at least 1 argument")
    first = _number("/", args[0])
    if len(args) == 1:
        if first == 0:
            raise KappaDivisionByZero("division by zero")
        return 1.0 / first
    result = first
    for arg in args[1:]:
        x = _number("/", arg)
        if x == 0:
            raise KappaDivisionByZero("division by zero")
        result /= x
    return result


BUILTINS: dict[str, NativeFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({Symbol(name): BuiltinFunction(name, fn) for name, fn in BUILTINS.items()})


def new_global_environment() -> Environment:
    """Return a root environment with the arithmetic builtins bound."""
    env = Environment()
    register(env)
    return env
