import pytest
from hypothesis import given, strategies as st

from mlisp.builtin import initialize_standard_environment
from mlisp.config import Scoping
from mlisp.evaluation.evaluator import evaluate
from mlisp.reader import read
from mlisp.types import Error, Lambda, Number, QExpr, SExpr, Symbol


def test_lambda_creation(run):
    fn = run("\\ {a b} {+ a b}")
    assert isinstance(fn, Lambda)
    assert fn.formals == (Symbol("a"), Symbol("b"))
    assert fn.body == (Symbol("+"), Symbol("a"), Symbol("b"))
    assert len(fn.env) == 0


def test_lambda_application(run):
    assert run("(\\ {a b} {+ a b}) 1 2") == Number(3)
    assert run("(\\ {x} {* x x}) 7") == Number(49)


def test_currying(run):
    assert run("((\\ {a b} {+ a b}) 1) 2") == Number(3)


def test_partial_application_returns_lambda(run):
    partial = run("(\\ {a b} {+ a b}) 1")
    assert isinstance(partial, Lambda)
    assert partial.formals == (Symbol("b"),)
    assert partial.env.get("a") == Number(1)
    assert partial.display() == "\\ {b} {+ 1 b}"


def test_partial_application_leaves_original_untouched(run, env):
    run("def {add} (\\ {a b} {+ a b})")
    run("def {inc} (add 1)")
    assert run("add 2 3") == Number(5)
    assert run("inc 4") == Number(5)
    assert run("inc 10") == Number(11)
    assert len(env.get("add").env) == 0
    assert len(env.get("inc").env) == 1


def test_curried_chain(run):
    run("def {add3} (\\ {a b c} {+ a b c})")
    assert run("((add3 1) 2) 3") == Number(6)
    assert run("(add3 1 2) 3") == Number(6)
    assert run("(add3 1) 2 3") == Number(6)


@given(st.integers(-1000, 1000), st.integers(-1000, 1000))
def test_curried_call_matches_full_call(a, b):
    env = initialize_standard_environment(Scoping.DYNAMIC)
    evaluate(env, read("def {f} (\\ {x y} {- x y})"))
    full = evaluate(env, read(f"f {a} {b}"))
    curried = evaluate(env, read(f"(f {a}) {b}"))
    assert full == curried == Number(a - b)


def test_recursion(run):
    run("def {fact} (\\ {n} {if (== n 0) {1} {* n (fact (- n 1))}})")
    assert run("fact 5") == Number(120)


# -----------------------------------------------------
# Variadic formals
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(\\ {x ... xs} {xs}) 1 2 3", QExpr([Number(2), Number(3)])),
        ("(\\ {x ... xs} {xs}) 1", QExpr()),
        ("(\\ {x ... xs} {x}) 1", Number(1)),
        ("(\\ {... xs} {xs}) 1 2", QExpr([Number(1), Number(2)])),
        ("(\\ {... xs} {eval (join {+} xs)}) 1 2 3 4", Number(10)),
    ],
)
def test_variadic(run, source, expected):
    assert run(source) == expected


def test_variadic_after_partial_application(run):
    run("def {f} (\\ {a b ... xs} {join (list a b) xs})")
    partial = run("f 1")
    assert partial.formals == (Symbol("b"), Symbol("..."), Symbol("xs"))
    assert run("(f 1) 2 3 4") == QExpr([Number(1), Number(2), Number(3), Number(4)])


@pytest.mark.parametrize(
    "source",
    [
        "(\\ {x ...} {x}) 1 2",
        "(\\ {x ...} {x}) 1",
        "(\\ {... a b} {a}) 1",
        "(\\ {... ...} {1}) 1",
    ],
)
def test_malformed_variadic(run, source):
    assert run(source) == Error("invalid function arguments")


def test_too_many_arguments(run):
    assert run("(\\ {x} {x}) 1 2") == Error("too many arguments")
    assert run("((\\ {x y} {x}) 1) 2 3") == Error("too many arguments")


# -----------------------------------------------------
# Definitions from inside a function body
# -----------------------------------------------------

def test_def_inside_function_is_global(run):
    run("def {f} (\\ {x} {def {g} x})")
    assert run("f 7") == SExpr()
    assert run("g") == Number(7)


def test_put_inside_function_is_local(run):
    run("def {y} 1")
    assert run("(\\ {x} {= {y} x}) 5") == SExpr()
    assert run("y") == Number(1)


def test_arguments_shadow_globals(run):
    run("def {x} 100")
    assert run("(\\ {x} {+ x 1}) 1") == Number(2)
    assert run("x") == Number(100)


@pytest.mark.parametrize(
    "source,message",
    [
        ("\\ {1} {x}", "cannot use non-symbol as argument: 1"),
        ("\\ {a {b}} {a}", "cannot use non-symbol as argument: {b}"),
        ("\\ {x}", "\\ called with too few arguments: expected 2, got 1"),
        ("\\ 1 {x}", "\\ called with wrong type for argument 1: expected q-expression, got number"),
        ("\\ {x} 1", "\\ called with wrong type for argument 2: expected q-expression, got number"),
    ],
)
def test_lambda_errors(run, source, message):
    assert run(source) == Error(message)
