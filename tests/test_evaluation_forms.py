import pytest

from kappa.errors import KappaArityError, KappaMalformedForm, KappaUnboundSymbol
from kappa.evaluation.evaluator import evaluate
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.printer import to_text
from kappa.reader.parser import parse_one
from kappa.types import Cons, Lambda, Nil, Symbol


# ------------------ quote ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote x)", "x"),
        ("'x", "x"),
        ("'(a b c)", "(a b c)"),
        ("'(+ 1 2)", "(+ 1 2)"),
        ("''a", "(quote a)"),
        ("'()", "NIL"),
        ("'42", "42"),
        ("'\"s\"", '"s"'),
    ]
)
def test_quote_returns_argument_unevaluated(run, source, expected):
    assert to_text(run(source)) == expected


@pytest.mark.parametrize("source", ["(quote)", "(quote x y)"])
def test_quote_arity(run, source):
    with pytest.raises(KappaMalformedForm):
        run(source)


def test_quote_aliases_parser_output(env):
    form = parse_one("(quote (1 2))")
    quoted = form.cdr.car
    assert evaluate(form, env) is quoted


def test_quote_dotted_tail_is_malformed(env):
    form = Cons(Symbol("quote"), Symbol("x"))  # (quote . x)
    with pytest.raises(KappaMalformedForm):
        evaluate(form, env)


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if nil 1 2)", "2"),
        ("(if 0 1 2)", "1"),
        ('(if "" 1 2)', "1"),
        ("(if t 1)", "1"),
        ("(if nil 1)", "NIL"),
        ("(if '() 1 2)", "2"),
        ("(if '(a) 1 2)", "1"),
        ("(if (- 1 1) 'yes 'no)", "yes"),
        ("(if t 'then undefined-symbol)", "then"),
        ("(if nil undefined-symbol 'else)", "else"),
    ]
)
def test_if(run, source, expected):
    assert to_text(run(source)) == expected


@pytest.mark.parametrize("source", ["(if)", "(if t)", "(if t 1 2 3)"])
def test_if_shape(run, source):
    with pytest.raises(KappaMalformedForm):
        run(source)


def test_if_improper_tail_is_malformed(env):
    form = Cons(Symbol("if"), Cons(True, Cons(1.0, 2.0)))  # (if t 1 . 2)
    with pytest.raises(KappaMalformedForm):
        evaluate(form, env)


def test_if_condition_errors_propagate(run):
    with pytest.raises(KappaUnboundSymbol):
        run("(if nope 1 2)")


# ------------------ lambda ------------------

def test_lambda_builds_a_closure(env):
    fn = evaluate(parse_one("(lambda (a b) (+ a b))"), env)
    assert isinstance(fn, Lambda)
    assert fn.formals == [Symbol("a"), Symbol("b")]
    assert fn.env is env
    assert to_text(fn) == "#<FUNCTION>"


def test_lambda_body_is_not_evaluated_at_definition(run):
    fn = run("(lambda () undefined-symbol)")
    assert isinstance(fn, Lambda)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("((lambda (a b) (+ a b)) 5 7)", "12"),
        ("((lambda () 42))", "42"),
        ("((lambda (x) x) 'sym)", "sym"),
        ("((lambda (x) ((lambda (y) (+ x y)) 3)) 9)", "12"),
        ("(((lambda (x) (lambda (y) (* x y))) 6) 7)", "42"),
        ("((lambda (f) (f 2 3)) +)", "5"),
        ("((lambda (x) ((lambda (x) x) 2)) 1)", "2"),
    ]
)
def test_lambda_application(run, source, expected):
    assert to_text(run(source)) == expected


@pytest.mark.parametrize(
    "source",
    ["((lambda (x) (+ x 2)) 3 4)", "((lambda (x y) (+ x y)) 5)", "((lambda () 1) 1)"],
)
def test_lambda_arity(run, source):
    with pytest.raises(KappaArityError):
        run(source)


@pytest.mark.parametrize(
    "source",
    [
        "(lambda)",
        "(lambda (x))",
        "(lambda (x) x x)",
        "(lambda (1) 1)",
        "(lambda (x \"y\") x)",
        "(lambda x x)",
        "(lambda ((x)) x)",
    ]
)
def test_lambda_shape(run, source):
    with pytest.raises(KappaMalformedForm):
        run(source)


def test_lambda_params_may_be_nil(run):
    assert run("((lambda nil 5))") == 5.0


def test_static_scoping_ignores_caller_bindings(run):
    run("(defun make-adder (n) (lambda (x) (+ x n)))")
    run("(defun call-with-n (n f) (f 1))")
    assert run("(call-with-n 100 (make-adder 10))") == 11.0


def test_duplicate_params_bind_last(run):
    assert run("((lambda (a a) a) 1 2)") == 2.0


# ------------------ defun ------------------

def test_defun_returns_name_and_binds_function(run, env):
    result = run("(defun add2 (a b) (+ a b))")
    assert result == Symbol("add2")
    assert to_text(result) == "add2"
    assert isinstance(env.lookup(Symbol("add2")), Lambda)
    assert run("(add2 3 4)") == 7.0


def test_defun_recursion(run):
    run("(defun double-once (again n) (if again (double-once nil (* n 2)) n))")
    assert run("(double-once t 21)") == 42.0


def test_defun_redefinition_replaces_binding(run):
    run("(defun f () 1)")
    run("(defun f () 2)")
    assert run("(f)") == 2.0


def test_defun_can_shadow_builtins(run):
    run("(defun + (a b) (* a b))")
    assert run("(+ 3 4)") == 12.0


def test_nested_defun_binds_in_call_frame_only(run):
    run("(defun outer (x) ((lambda (ignored) (inner)) (defun inner () x)))")
    assert run("(outer 5)") == 5.0
    with pytest.raises(KappaUnboundSymbol):
        run("(inner)")


@pytest.mark.parametrize(
    "source",
    [
        "(defun)",
        "(defun f)",
        "(defun f (x))",
        "(defun f (x) x x)",
        "(defun 1 (x) x)",
        "(defun \"f\" (x) x)",
        "(defun (f) (x) x)",
        "(defun f (1) 1)",
    ]
)
def test_defun_shape(run, source):
    with pytest.raises(KappaMalformedForm):
        run(source)


def test_failed_defun_leaves_environment_untouched(run, env):
    with pytest.raises(KappaMalformedForm):
        run("(defun g (1) 1)")
    assert Symbol("g") not in env


def test_special_form_names_are_only_special_in_head_position(run, env):
    env.define(Symbol("if"), 3.0)
    assert run("(+ if 1)") == 4.0


def test_registry_names_every_special_form():
    assert set(SPECIAL_FORMS) == {Symbol("quote"), Symbol("if"), Symbol("lambda"), Symbol("defun")}


def test_nil_is_the_empty_list(run):
    assert run("'()") is Nil
