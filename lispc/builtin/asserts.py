"""Argument checks shared by the builtins.

Each check returns None when the argument list is acceptable. On failure it
releases the whole argument list and returns the Error value the builtin
should hand back, so checks chain with `or`:

    err = count_error("head", a, 1) or type_error("head", a, 0, QExpr)
    if err is not None:
        return err
"""

from __future__ import annotations

from typing import Optional

from lispc.types.value import Error, Expr, SExpr, Value


def arg_error(a: SExpr, message: str) -> Error:
    a.release()
    return Error(message)


def count_error(name: str, a: SExpr, expected: int) -> Optional[Error]:
    if len(a) != expected:
        return arg_error(
            a,
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(a)}, Expected {expected}.",
        )
    return None


def min_count_error(name: str, a: SExpr, minimum: int) -> Optional[Error]:
    if len(a) < minimum:
        return arg_error(
            a,
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(a)}, Expected {minimum}.",
        )
    return None


def type_error(name: str, a: SExpr, i: int, expected: type[Value]) -> Optional[Error]:
    arg = a[i]
    if not isinstance(arg, expected):
        return arg_error(
            a,
            f"Function '{name}' passed incorrect type for argument {i}. "
            f"Got {arg.type_name}, Expected {expected.TYPE_NAME}.",
        )
    return None


def empty_error(name: str, a: SExpr, i: int) -> Optional[Error]:
    arg = a[i]
    if isinstance(arg, Expr) and len(arg) == 0:
        return arg_error(a, f"Function '{name}' passed {{}} for argument {i}.")
    return None
