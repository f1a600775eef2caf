import pytest
from hypothesis import given, strategies as st

from lispc.types.environment import Environment
from lispc.types.value import (
    INT64_MAX,
    INT64_MIN,
    Error,
    Function,
    Number,
    QExpr,
    SExpr,
    Symbol,
)
from lispc.builtin.catalog import Builtin
from lispc.evaluation.evaluator import evaluate

# -----------------------------------------------------
# Self evaluation
# -----------------------------------------------------

@given(st.integers(min_value=INT64_MIN, max_value=INT64_MAX))
def test_numbers_evaluate_to_themselves(n):
    v = Number(n)
    assert str(evaluate(Environment(), v)) == str(n)


@given(st.text(max_size=20))
def test_errors_evaluate_to_themselves(message):
    assert str(evaluate(Environment(), Error(message))) == f"Error: {message}"


@pytest.mark.parametrize("builtin", list(Builtin))
def test_functions_evaluate_to_themselves(builtin):
    assert str(evaluate(Environment(), Function(builtin))) == "<function>"


def test_qexpr_is_not_evaluated(env):
    v = QExpr([Symbol("+"), Number(1), SExpr([Symbol("undefined")])])
    assert str(evaluate(env, v)) == "{+ 1 (undefined)}"


# -----------------------------------------------------
# Symbols
# -----------------------------------------------------

def test_symbol_lookup(env):
    env.put("x", Number(42))
    assert evaluate(env, Symbol("x")) == Number(42)


def test_symbol_lookup_returns_a_copy(env):
    env.put("xs", QExpr([Number(1), Number(2)]))
    got = evaluate(env, Symbol("xs"))
    got.pop(0)
    assert str(env.get("xs")) == "{1 2}"


def test_unbound_symbol(env):
    assert evaluate(env, Symbol("z")) == Error("Unbound symbol 'z'")


# -----------------------------------------------------
# S-Expression reduction
# -----------------------------------------------------

def test_empty_sexpr(env):
    assert str(evaluate(env, SExpr())) == "()"


@pytest.mark.parametrize(
    "child",
    [Number(7), QExpr([Number(1)]), SExpr([Symbol("+"), Number(1), Number(2)]), SExpr()],
)
def test_single_child_collapses(env, child):
    expected = str(evaluate(env, child.copy()))
    assert str(evaluate(env, SExpr([child]))) == expected


def test_application(env):
    v = SExpr([Symbol("+"), Number(1), Number(2)])
    assert evaluate(env, v) == Number(3)


def test_first_error_wins(env):
    v = SExpr([Symbol("+"), Symbol("a"), Number(1), Symbol("b")])
    assert evaluate(env, v) == Error("Unbound symbol 'a'")


def test_error_from_nested_expression(env):
    v = SExpr([Symbol("+"), Number(1), SExpr([Symbol("/"), Number(1), Number(0)])])
    assert evaluate(env, v) == Error("Division by zero")


def test_first_element_not_a_function(env):
    v = SExpr([Number(1), Number(2)])
    assert evaluate(env, v) == Error("First element is not a function")


def test_every_child_is_evaluated_before_errors_are_checked(run):
    # The def runs even though a later sibling fails
    assert run("((def {z} 5) undefined)") == "Error: Unbound symbol 'undefined'"
    assert run("z") == "5"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", "()"),
        ("()", "()"),
        ("(())", "()"),
        ("5", "5"),
        ("(5)", "5"),
        ("((((5))))", "5"),
        ("+", "<function>"),
        ("{1 2 (+ 1 2)}", "{1 2 (+ 1 2)}"),
        ("(1 2)", "Error: First element is not a function"),
        ("({+} 1 2)", "Error: First element is not a function"),
        ("x", "Error: Unbound symbol 'x'"),
        ("99999999999999999999", "Error: Invalid number"),
        ("(+ 1 99999999999999999999)", "Error: Invalid number"),
    ]
)
def test_lines(run, source, expected):
    assert run(source) == expected
