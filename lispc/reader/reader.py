"""Convert a syntax tree into an owned value tree."""

from __future__ import annotations

import re

from lispc.errors import LispcReadError
from lispc.types.value import INT64_MAX, INT64_MIN, Error, Expr, Number, QExpr, SExpr, Symbol, Value
from lispc.reader.grammar import AstNode

# Tokens with no semantic payload
SKIPPED_CONTENTS = frozenset({"(", ")", "{", "}"})
ANCHOR_TAG = "regex"
NUMBER_RE = re.compile(r"-?[0-9]+")
PAYLOAD_TAGS = ("number", "symbol", "sexpr", "qexpr")


def _is_whitespace(node: AstNode) -> bool:
    return (
        node.is_leaf
        and not node.contents.strip()
        and not any(t in node.tag for t in PAYLOAD_TAGS)
    )


def read_number(node: AstNode) -> Value:
    if not NUMBER_RE.fullmatch(node.contents):
        return Error("Invalid number")
    x = int(node.contents, 10)
    if not INT64_MIN <= x <= INT64_MAX:
        return Error("Invalid number")
    return Number(x)


def read(node: AstNode) -> Value:
    """Read `node` and its children into a new value."""
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    x: Expr
    if node.tag == ">" or "sexpr" in node.tag:
        x = SExpr()
    elif "qexpr" in node.tag:
        x = QExpr()
    else:
        raise LispcReadError(f"Cannot read node tagged {node.tag!r}")

    for child in node.children:
        if child.contents in SKIPPED_CONTENTS:
            continue
        if child.tag == ANCHOR_TAG or _is_whitespace(child):
            continue
        x.add(read(child))
    return x
