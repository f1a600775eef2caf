import pytest
from hypothesis import given, strategies as st

from lispc.errors import LispcSyntaxError
from lispc.reader.grammar import AstNode, Token, TokenStream, lex, parse
from lispc.debug_utils.ast_print import format_ast


def _types_and_values(source):
    return [(t.type, t.value) for t in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("42", [("number", "42")]),
        ("-42", [("number", "-42")]),
        ("-", [("symbol", "-")]),
        ("+5", [("symbol", "+5")]),
        ("5abc", [("number", "5"), ("symbol", "abc")]),
        ("a-b", [("symbol", "a-b")]),
        ("(+ 1 -2)", [("lparen", "("), ("symbol", "+"), ("number", "1"), ("number", "-2"), ("rparen", ")")]),
        ("{a {b}}", [("lbrace", "{"), ("symbol", "a"), ("lbrace", "{"), ("symbol", "b"), ("rbrace", "}"), ("rbrace", "}")]),
        ("  \t x \n y ", [("symbol", "x"), ("symbol", "y")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert _types_and_values(source) == expected


def test_lexer_positions():
    tokens = list(lex("(a\n  bc)"))
    assert tokens[0] == Token("lparen", "(", 1, 1)
    assert tokens[1] == Token("symbol", "a", 1, 2)
    assert tokens[2] == Token("symbol", "bc", 2, 3)
    assert tokens[3] == Token("rparen", ")", 2, 5)


def test_parse_tree_shape():
    root = parse("(+ 1)")
    assert root.tag == ">"
    assert [c.tag for c in root.children] == ["regex", "expr|sexpr|>", "regex"]
    sexpr = root.children[1]
    assert [(c.tag, c.contents) for c in sexpr.children] == [
        ("char", "("),
        ("expr|symbol|regex", "+"),
        ("expr|number|regex", "1"),
        ("char", ")"),
    ]


def test_parse_qexpr_tag():
    root = parse("{x}")
    assert root.children[1].tag == "expr|qexpr|>"


def test_parse_empty_input():
    root = parse("")
    assert [c.tag for c in root.children] == ["regex", "regex"]


def test_parse_all_top_level():
    stream = TokenStream(lex("1 (2) {3}"))
    tags = [node.tag for node in stream.parse_all()]
    assert tags == ["expr|number|regex", "expr|sexpr|>", "expr|qexpr|>"]


@pytest.mark.parametrize(
    "source,message",
    [
        ("(1 2", r"<stdin>:1:5: error: expected '\)' at end of input"),
        ("{1", r"<stdin>:1:3: error: expected '}' at end of input"),
        (")", r"<stdin>:1:1: error: unexpected '\)'"),
        ("(1}", r"<stdin>:1:3: error: expected '\)' at '}'"),
        ("1.5", r"<stdin>:1:2: error: unexpected character '\.'"),
        ("(a\n #)", r"<stdin>:2:2: error: unexpected character '#'"),
    ]
)
def test_syntax_errors(source, message):
    with pytest.raises(LispcSyntaxError, match=message):
        parse(source)


def test_syntax_error_carries_position():
    with pytest.raises(LispcSyntaxError) as info:
        parse("(a b", filename="demo.lisp")
    assert info.value.filename == "demo.lisp"
    assert (info.value.line, info.value.col) == (1, 5)


def test_format_ast():
    assert format_ast(parse("5")) == (
        ">\n"
        "  regex:1:1 ''\n"
        "  expr|number|regex:1:1 '5'\n"
        "  regex:1:2 ''\n"
    )


def test_format_ast_without_positions():
    text = format_ast(parse("(a)"), {"indent": 1, "positions": False})
    assert text.splitlines() == [
        ">",
        " regex ''",
        " expr|sexpr|>",
        "  char '('",
        "  expr|symbol|regex 'a'",
        "  char ')'",
        " regex ''",
    ]


# Convert nested list to lispc source string
def _to_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_source(e) for e in expr)})"
    return str(expr)


nested = st.recursive(
    st.one_of(st.integers(min_value=-10**6, max_value=10**6), st.sampled_from(["a", "+", "head", "x_1"])),
    lambda children: st.lists(children, max_size=4),
    max_leaves=20,
)


def _count_leaves(node: AstNode) -> int:
    if node.tag.startswith("expr|number") or node.tag.startswith("expr|symbol"):
        return 1
    return sum(_count_leaves(c) for c in node.children)


def _count_py_leaves(expr) -> int:
    if isinstance(expr, list):
        return sum(_count_py_leaves(e) for e in expr)
    return 1


@given(nested)
def test_parse_keeps_every_atom(expr):
    root = parse(_to_source(expr))
    assert _count_leaves(root) == _count_py_leaves(expr)
