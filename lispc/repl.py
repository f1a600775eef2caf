"""Interactive read-eval-print loop."""

from __future__ import annotations

import logging
import readline
from pathlib import Path
from typing import Optional

from lispc import __version__
from lispc.config import get_history_file, get_prompt
from lispc.debug_utils.ast_print import format_ast
from lispc.errors import LispcSyntaxError
from lispc.interpreter import Interpreter
from lispc.reader.grammar import parse

logger = logging.getLogger(__name__)

BANNER = f"Lispc version {__version__}\nPress Ctrl+C to exit\n"


def format_source(source: str, filename: str = "<stdin>") -> str:
    """Render the syntax tree of `source` for `--ast` output."""
    tree = parse(source, filename)
    try:
        return format_ast(tree).rstrip("\n")
    except RecursionError:
        raise LispcSyntaxError("expression nested too deeply", filename) from None


def run_line(interp: Interpreter, line: str, show_ast: bool = False) -> str:
    """Return what the REPL prints for `line`: the result or a syntax diagnostic."""
    try:
        if show_ast:
            return format_source(line)
        return str(interp.eval(line))
    except LispcSyntaxError as e:
        logger.debug(f"Rejected {line!r}: {e}")
        return str(e)


def _load_history(path: Optional[Path]) -> None:
    if path is None or not path.exists():
        return
    try:
        readline.read_history_file(str(path))
    except OSError as e:
        logger.warning(f"Cannot read history file {path}: {e}")


def _save_history(path: Optional[Path]) -> None:
    if path is None:
        return
    try:
        readline.write_history_file(str(path))
    except OSError as e:
        logger.warning(f"Cannot write history file {path}: {e}")


def repl(interp: Interpreter | None = None, show_ast: bool = False) -> None:
    if interp is None:
        interp = Interpreter()

    prompt = get_prompt()
    history = get_history_file()
    _load_history(history)

    print(BANNER)
    try:
        while True:
            try:
                line = input(prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break
            print(run_line(interp, line, show_ast))
    finally:
        _save_history(history)
