from lispc.types.value import (
    Value,
    Number,
    Symbol,
    Error,
    Function,
    Expr,
    SExpr,
    QExpr,
)
from lispc.types.environment import Environment

__all__ = (
    "Value",
    "Number",
    "Symbol",
    "Error",
    "Function",
    "Expr",
    "SExpr",
    "QExpr",
    "Environment",
)
