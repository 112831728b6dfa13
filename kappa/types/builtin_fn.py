from __future__ import annotations

from typing import Callable, Sequence

from kappa import LispValue

NativeFn = Callable[[Sequence[LispValue]], LispValue]


class BuiltinFunction:
    """A native procedure bound into the global environment."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: Sequence[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"#<BUILTIN {self.name}>"

    def __repr__(self) -> str:
        return f"BuiltinFunction({self.name!r})"
