"""Indented dump of a syntax tree, one node per line."""

from io import StringIO

from lispc.reader.grammar import AstNode

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_TAG = "\033[94m"
COLOR_CONTENTS = "\033[92m"
COLOR_POSITION = "\033[90m"

DEFAULT_OPTIONS = {
    "indent": 2,
    "color": False,
    "positions": True,
}


def _colorize(text: str, color: str, options: dict) -> str:
    if options.get("color", False):
        return f"{color}{text}{RESET}"
    return text


def _write_node(buffer: StringIO, node: AstNode, depth: int, options: dict) -> None:
    buffer.write(" " * (depth * options.get("indent", 2)))
    buffer.write(_colorize(node.tag, COLOR_TAG, options))
    if node.is_leaf:
        if options.get("positions", True):
            buffer.write(_colorize(f":{node.line}:{node.col}", COLOR_POSITION, options))
        buffer.write(" ")
        buffer.write(_colorize(f"'{node.contents}'", COLOR_CONTENTS, options))
    buffer.write("\n")
    for child in node.children:
        _write_node(buffer, child, depth + 1, options)


def format_ast(node: AstNode, options: dict = DEFAULT_OPTIONS) -> str:
    """
    Render `node` as
        >
          regex:1:1 ''
          expr|sexpr|>
            char:1:1 '('
            ...
    """
    with StringIO() as buffer:
        _write_node(buffer, node, 0, options)
        return buffer.getvalue()


def ast_print(node: AstNode, options: dict = DEFAULT_OPTIONS) -> None:
    print(format_ast(node, options), end="")
