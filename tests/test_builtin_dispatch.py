import pytest

from lispc.types.environment import Environment
from lispc.types.value import Error, Number, SExpr
from lispc.builtin import BUILTINS, Builtin, call, dispatch


def test_table_covers_catalog():
    assert set(BUILTINS) == set(Builtin)


def test_catalog_names():
    assert {b.value for b in Builtin} == {"list", "head", "tail", "join", "eval", "def", "+", "-", "*", "/"}


@pytest.mark.parametrize("name", ["car", "lambda", "", "HEAD"])
def test_unknown_name(name):
    args = SExpr([Number(1)])
    assert call(Environment(), name, args) == Error("Unknown function")
    assert len(args) == 0


def test_dispatch_by_enum():
    result = dispatch(Environment(), Builtin.MUL, SExpr([Number(6), Number(7)]))
    assert result == Number(42)


def test_lookup():
    assert Builtin.lookup("+") is Builtin.ADD
    assert Builtin.lookup("nope") is None


@pytest.mark.parametrize("name", ["+", "-", "*", "/"])
def test_arithmetic_without_arguments(name):
    result = call(Environment(), name, SExpr())
    assert result == Error(f"Function '{name}' passed incorrect number of arguments. Got 0, Expected 1.")
