from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lispc import __version__
from lispc.config import get_log_level, get_prelude_path
from lispc.errors import LispcSyntaxError
from lispc.interpreter import Interpreter
from lispc.repl import format_source, repl, run_line

logger = logging.getLogger("lispc")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lispc", description="Lispc expression evaluator")
    parser.add_argument("file", nargs="?", type=Path, help="evaluate each expression of FILE and print the results")
    parser.add_argument("-e", "--eval", dest="code", action="append", default=[],
                        help="evaluate CODE and print the result (repeatable)")
    parser.add_argument("--ast", action="store_true", help="print the syntax tree instead of evaluating")
    parser.add_argument("--no-prelude", action="store_true", help="ignore LISPC_PRELUDE_PATH")
    parser.add_argument("--version", action="version", version=f"lispc {__version__}")
    return parser


def run_file(interp: Interpreter, path: Path, show_ast: bool = False) -> int:
    """Evaluate every top-level expression of `path`, printing each result."""
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"lispc: cannot read {path}: {e}", file=sys.stderr)
        return 1

    try:
        if show_ast:
            print(format_source(source, str(path)))
        else:
            for result in interp.eval_prelude(source, str(path)):
                print(result)
    except LispcSyntaxError as e:
        print(e)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    prelude = None if args.no_prelude else get_prelude_path()
    if prelude is not None:
        try:
            interp.load_file(prelude)
        except FileNotFoundError:
            logger.warning(f"Prelude {prelude} not found")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read prelude {prelude}: {e}")
        except LispcSyntaxError as e:
            logger.error(f"Prelude {prelude} rejected: {e}")

    if args.code:
        for code in args.code:
            print(run_line(interp, code, args.ast))
        return 0

    if args.file is not None:
        return run_file(interp, args.file, args.ast)

    repl(interp, args.ast)
    return 0


if __name__ == "__main__":
    sys.exit(main())
