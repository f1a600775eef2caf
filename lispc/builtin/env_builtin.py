"""Environment builtins: `def` and registration of the builtin catalog."""
from __future__ import annotations

import logging

from lispc.types.environment import Environment
from lispc.types.value import Function, QExpr, SExpr, Symbol, Value
from lispc.builtin.asserts import arg_error, min_count_error, type_error
from lispc.builtin.catalog import Builtin

logger = logging.getLogger(__name__)


def builtin_def(env: Environment, a: SExpr) -> Value:
    """(def {names...} values...) binds each name to the matching value."""
    err = min_count_error("def", a, 1) or type_error("def", a, 0, QExpr)
    if err is not None:
        return err

    syms = a[0]
    for sym in syms:
        if not isinstance(sym, Symbol):
            return arg_error(
                a,
                f"Function 'def' cannot define non-symbol. "
                f"Got {sym.type_name}, Expected {Symbol.TYPE_NAME}.",
            )

    if len(syms) != len(a) - 1:
        return arg_error(
            a,
            f"Function 'def' passed incorrect number of values for symbols. "
            f"Got {len(a) - 1}, Expected {len(syms)}.",
        )

    for i, sym in enumerate(syms):
        logger.debug(f"def {sym.name} = {a[i + 1]}")
        env.put(sym.name, a[i + 1])

    a.release()
    return SExpr()


def register(env: Environment) -> None:
    """Bind every builtin in the catalog under its Lisp name."""
    for builtin in Builtin:
        env.put(builtin.value, Function(builtin))
