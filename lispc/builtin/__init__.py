"""Builtin library: one dispatch table over the closed Builtin catalog."""
from __future__ import annotations

from typing import Callable

from lispc.types.environment import Environment
from lispc.types.value import Error, SExpr, Value
from lispc.builtin.catalog import Builtin
from lispc.builtin.list_builtin import (
    builtin_eval,
    builtin_head,
    builtin_join,
    builtin_list,
    builtin_tail,
)
from lispc.builtin.arith_builtin import add, sub, mul, div
from lispc.builtin.env_builtin import builtin_def, register

BuiltinFn = Callable[[Environment, SExpr], Value]

BUILTINS: dict[Builtin, BuiltinFn] = {
    Builtin.LIST: builtin_list,
    Builtin.HEAD: builtin_head,
    Builtin.TAIL: builtin_tail,
    Builtin.JOIN: builtin_join,
    Builtin.EVAL: builtin_eval,
    Builtin.DEF: builtin_def,
    Builtin.ADD: add,
    Builtin.SUB: sub,
    Builtin.MUL: mul,
    Builtin.DIV: div,
}


def dispatch(env: Environment, builtin: Builtin, a: SExpr) -> Value:
    """Apply `builtin` to the argument list `a`, which it consumes."""
    impl = BUILTINS.get(builtin)
    if impl is None:
        a.release()
        return Error("Unknown function")
    return impl(env, a)


def call(env: Environment, name: str, a: SExpr) -> Value:
    """Apply the builtin selected by its Lisp name."""
    builtin = Builtin.lookup(name)
    if builtin is None:
        a.release()
        return Error("Unknown function")
    return dispatch(env, builtin, a)


__all__ = ("Builtin", "BUILTINS", "BuiltinFn", "dispatch", "call", "register")
