"""Canonical textual rendering of Kappa values.

Numbers that hold a whole value representable as a 64-bit integer print as
integers; every other number prints in the shortest general format, switching
to exponent notation below 1e-4 or from 1e6 upwards (`1.5e+06`, `1e-05`).
"""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from kappa import LispValue
from kappa.types.cons import Cons
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import NilType
from kappa.types.symbol import Symbol

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63  # exclusive


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if _INT64_MIN <= value < _INT64_MAX and value == int(value):
        return str(int(value))
    return _format_general(value)


def _format_general(value: float) -> str:
    # repr() yields the shortest digit string that round-trips
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    nd = len(digits)
    dp = nd + exponent  # position of the decimal point relative to digits
    neg = "-" if sign else ""

    exp = dp - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        return f"{neg}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if dp <= 0:
        return f"{neg}0.{'0' * -dp}{digits}"
    if dp >= nd:
        return f"{neg}{digits}{'0' * (dp - nd)}"
    return f"{neg}{digits[:dp]}.{digits[dp:]}"


def to_text(expr: LispValue) -> str:
    """Render `expr` the way the REPL displays results."""
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()


def _write(expr: LispValue, buffer: StringIO) -> None:
    match expr:
        case bool():
            buffer.write("T" if expr else "NIL")
        case float() | int():
            buffer.write(format_number(float(expr)))
        case str():
            buffer.write(f'"{expr}"')
        case Symbol():
            buffer.write(expr.id)
        case NilType():
            buffer.write("NIL")
        case Cons():
            _write_list(expr, buffer)
        case Lambda():
            buffer.write("#<FUNCTION>")
        case _:
            buffer.write(str(expr))


def _write_list(cell: Cons, buffer: StringIO) -> None:
    buffer.write("(")
    current: LispValue = cell
    first = True
    while isinstance(current, Cons):
        if not first:
            buffer.write(" ")
        _write(current.car, buffer)
        first = False
        current = current.cdr
    if not isinstance(current, NilType):
        buffer.write(" . ")
        _write(current, buffer)
    buffer.write(")")
