import pytest

from kappa.builtins import new_global_environment
from kappa.printer import format_number, to_text
from kappa.types.builtin_fn import BuiltinFunction
from kappa.types.cons import Cons
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (42.0, "42"),
        (-5.0, "-5"),
        (0.0, "0"),
        (-0.0, "0"),
        (3.14, "3.14"),
        (0.2, "0.2"),
        (-0.25, "-0.25"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1 / 3, "0.3333333333333333"),
        (0.0001, "0.0001"),
        (0.00001, "1e-05"),
        (1.5e-07, "1.5e-07"),
        (123456.5, "123456.5"),
        (1234567.5, "1.2345675e+06"),
        (1e15, "1000000000000000"),
        (1e20, "1e+20"),
        (-2.5e21, "-2.5e+21"),
        (float(2 ** 63), "9.223372036854776e+18"),
        (float(-(2 ** 63)), "-9223372036854775808"),
        (float("inf"), "+Inf"),
        (float("-inf"), "-Inf"),
        (float("nan"), "NaN"),
    ]
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("hello", '"hello"'),
        ('say "hi"', '"say "hi""'),
        ("", '""'),
        (True, "T"),
        (False, "NIL"),
        (Nil, "NIL"),
        (Symbol("add2"), "add2"),
        (Symbol("Mixed-Case"), "Mixed-Case"),
        (Cons.from_iterable([1.0, 2.0, 3.0]), "(1 2 3)"),
        (Cons.from_iterable([Symbol("a"), Cons.from_iterable(["b", True]), Nil]), '(a ("b" T) NIL)'),
        (Cons(1.0, 2.0), "(1 . 2)"),
        (Cons.from_iterable([1.0, 2.0], tail=Symbol("rest")), "(1 2 . rest)"),
        (Cons(Cons(1.0, 2.0), Nil), "((1 . 2))"),
    ]
)
def test_to_text(expr, expected):
    assert to_text(expr) == expected


def test_functions_render_opaquely():
    env = new_global_environment()
    lam = Lambda([Symbol("x")], Symbol("x"), env)
    assert to_text(lam) == "#<FUNCTION>"
    assert to_text(env.lookup(Symbol("+"))) == "#<BUILTIN +>"
    assert to_text(Cons.from_iterable([lam, 1.0])) == "(#<FUNCTION> 1)"


def test_shared_structure_prints_at_every_reference():
    shared = Cons.from_iterable([Symbol("x")])
    outer = Cons.from_iterable([shared, shared])
    assert to_text(outer) == "((x) (x))"


def test_cons_str_uses_lisp_rendering():
    assert str(Cons.from_iterable([1.0, "a"])) == '(1 "a")'
    assert str(BuiltinFunction("+", lambda args: 0.0)) == "#<BUILTIN +>"
