"""Core evaluator for lispc.

Evaluation consumes its input: symbols are replaced by a copy of their
binding, S-Expressions are reduced by evaluating every child and applying the
first child (a Function) to the rest. Everything else evaluates to itself.
Failures are Error values that propagate outward, never exceptions.
"""

from __future__ import annotations

from lispc.types.environment import Environment
from lispc.types.value import Error, Function, SExpr, Symbol, Value
from lispc.builtin import dispatch


def evaluate(env: Environment, v: Value) -> Value:
    """Evaluate `v` against `env`, taking ownership of `v`."""
    match v:
        case Symbol(name):
            x = env.get(name)
            v.release()
            return x
        case SExpr():
            return evaluate_sexpr(env, v)

    # --- Numbers, errors, functions and Q-Expressions evaluate to themselves ---
    return v


def evaluate_sexpr(env: Environment, v: SExpr) -> Value:
    # Every child is evaluated before any error is looked for
    for i, cell in enumerate(v.cells):
        v.cells[i] = evaluate(env, cell)

    for i, cell in enumerate(v.cells):
        if isinstance(cell, Error):
            return v.take(i)

    if len(v) == 0:
        return v

    if len(v) == 1:
        return v.take(0)

    f = v.pop(0)
    if not isinstance(f, Function):
        f.release()
        v.release()
        return Error("First element is not a function")

    return dispatch(env, f.builtin, v)
