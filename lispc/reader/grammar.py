"""
  lispc grammar: tokenizer and parser

Turns a line of source into a tree of AstNode. The language is

    number : /-?[0-9]+/
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&]+/
    sexpr  : '(' <expr>* ')'
    qexpr  : '{' <expr>* '}'
    expr   : <number> | <symbol> | <sexpr> | <qexpr>
    lispc  : /^/ <expr>* /$/

Node tags name the chain of grammar rules that produced them, joined by '|'
(e.g. "expr|number|regex" for a number leaf, "expr|sexpr|>" for a list). The
root is tagged ">". Bracket tokens are kept as "char" leaves and the start and
end of input as empty "regex" anchors; the reader skips both.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional

from lispc.errors import LispcSyntaxError


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # tried before symbol: "-5" is a number, "-" a symbol
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)"
    r")"
)

CLOSING = {"lparen": ("rparen", ")"), "lbrace": ("rbrace", "}")}
COMPOSITE_TAGS = {"lparen": "expr|sexpr|>", "lbrace": "expr|qexpr|>"}


@dataclass
class AstNode:
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 1
    col: int = 1

    @property
    def is_leaf(self) -> bool:
        return not self.children


class Token(NamedTuple):
    type: str
    value: str
    line: int
    col: int


def _position(source: str, pos: int) -> tuple[int, int]:
    line = source.count("\n", 0, pos) + 1
    col = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, col


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields Token(type, value, line, col)."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            line, col = _position(source, pos)
            raise LispcSyntaxError(f"unexpected character {source[pos]!r}", filename, line, col)
        for nm in ("lparen", "rparen", "lbrace", "rbrace", "number", "symbol"):
            if m.group(nm):
                line, col = _position(source, m.start(nm))
                yield Token(nm, m.group(nm), line, col)
                pos = m.end()
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], filename: str = "<stdin>"):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.filename = filename
        self.line = 1
        self.col = 1

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.buffer.pop(0) if self.buffer else next(self.tokens)
        self.line, self.col = tok.line, tok.col + len(tok.value)
        return tok

    def error(self, message: str, tok: Optional[Token] = None) -> LispcSyntaxError:
        if tok is None:
            return LispcSyntaxError(message, self.filename, self.line, self.col)
        return LispcSyntaxError(message, self.filename, tok.line, tok.col)

    def parse_expr(self) -> AstNode:
        tok = self.peek()
        if tok is None:
            raise self.error("expected expression at end of input")

        if tok.type in ("number", "symbol"):
            self.advance()
            return AstNode(f"expr|{tok.type}|regex", tok.value, line=tok.line, col=tok.col)

        if tok.type in CLOSING:
            self.advance()
            close_type, close_char = CLOSING[tok.type]
            node = AstNode(COMPOSITE_TAGS[tok.type], line=tok.line, col=tok.col)
            node.children.append(AstNode("char", tok.value, line=tok.line, col=tok.col))
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self.error(f"expected '{close_char}' at end of input")
                if nxt.type == close_type:
                    self.advance()
                    node.children.append(AstNode("char", nxt.value, line=nxt.line, col=nxt.col))
                    return node
                if nxt.type in ("rparen", "rbrace"):
                    raise self.error(f"expected '{close_char}' at '{nxt.value}'", nxt)
                node.children.append(self.parse_expr())

        raise self.error(f"unexpected '{tok.value}'", tok)

    def parse_all(self) -> Iterator[AstNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    """Parse a whole input into a root node tagged '>'."""
    stream = TokenStream(lex(source, filename), filename)
    root = AstNode(">")
    root.children.append(AstNode("regex"))
    try:
        root.children.extend(stream.parse_all())
    except RecursionError:
        raise LispcSyntaxError("expression nested too deeply", filename) from None
    line, col = _position(source, len(source))
    root.children.append(AstNode("regex", line=line, col=col))
    return root
