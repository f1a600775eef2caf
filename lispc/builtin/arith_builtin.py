"""Integer arithmetic builtins.

Numbers behave like C `long`: results wrap at 64 bits and division truncates
toward zero.
"""
from __future__ import annotations

from lispc.types.environment import Environment
from lispc.types.value import Error, Number, SExpr, Value, wrap_int64
from lispc.builtin.asserts import arg_error, min_count_error


def _truncating_div(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def builtin_op(a: SExpr, op: str) -> Value:
    """Fold the numeric arguments left to right with `op`."""
    if any(not isinstance(cell, Number) for cell in a):
        return arg_error(a, "Cannot operate on non-number")
    err = min_count_error(op, a, 1)
    if err is not None:
        return err

    x = a.pop(0)
    if op == "-" and len(a) == 0:
        x.num = wrap_int64(-x.num)

    while len(a) > 0:
        y = a.pop(0)
        if op == "+":
            x.num = wrap_int64(x.num + y.num)
        elif op == "-":
            x.num = wrap_int64(x.num - y.num)
        elif op == "*":
            x.num = wrap_int64(x.num * y.num)
        elif op == "/":
            if y.num == 0:
                x = Error("Division by zero")
                break
            x.num = wrap_int64(_truncating_div(x.num, y.num))

    # Whatever the fold did not reach is discarded
    a.release()
    return x


def add(env: Environment, a: SExpr) -> Value:
    """Sum of all arguments."""
    return builtin_op(a, "+")


def sub(env: Environment, a: SExpr) -> Value:
    """Subtract the rest from the first argument; unary negation for one argument."""
    return builtin_op(a, "-")


def mul(env: Environment, a: SExpr) -> Value:
    """Product of all arguments."""
    return builtin_op(a, "*")


def div(env: Environment, a: SExpr) -> Value:
    """Divide left to right; any zero divisor yields a Division by zero error."""
    return builtin_op(a, "/")
