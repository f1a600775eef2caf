"""List primitives: list, head, tail, join and eval.

Every builtin takes ownership of its argument list (an S-Expression of
already evaluated values) and either repurposes it or releases it.
"""
from __future__ import annotations

from lispc.types.environment import Environment
from lispc.types.value import QExpr, SExpr, Value
from lispc.builtin.asserts import count_error, empty_error, min_count_error, type_error


def builtin_list(env: Environment, a: SExpr) -> Value:
    """Relabel the arguments as a Q-Expression."""
    return a.relabel(QExpr)


def builtin_head(env: Environment, a: SExpr) -> Value:
    """Return a Q-Expression holding only the first element of the argument."""
    err = (
        count_error("head", a, 1)
        or type_error("head", a, 0, QExpr)
        or empty_error("head", a, 0)
    )
    if err is not None:
        return err

    v = a.take(0)
    while len(v) > 1:
        v.pop(1).release()
    return v


def builtin_tail(env: Environment, a: SExpr) -> Value:
    """Return the argument with its first element removed."""
    err = (
        count_error("tail", a, 1)
        or type_error("tail", a, 0, QExpr)
        or empty_error("tail", a, 0)
    )
    if err is not None:
        return err

    v = a.take(0)
    v.pop(0).release()
    return v


def builtin_join(env: Environment, a: SExpr) -> Value:
    """Concatenate all Q-Expression arguments, in order."""
    err = min_count_error("join", a, 1)
    if err is not None:
        return err
    for i in range(len(a)):
        err = type_error("join", a, i, QExpr)
        if err is not None:
            return err

    x = a.pop(0)
    while len(a):
        x = x.join(a.pop(0))
    a.release()
    return x


def builtin_eval(env: Environment, a: SExpr) -> Value:
    """Evaluate a Q-Expression as if it were an S-Expression."""
    # Imported here: the evaluator dispatches back into this package
    from lispc.evaluation.evaluator import evaluate

    err = count_error("eval", a, 1) or type_error("eval", a, 0, QExpr)
    if err is not None:
        return err

    x = a.take(0).relabel(SExpr)
    return evaluate(env, x)
