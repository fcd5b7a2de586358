"""Command line entry point: load files, then start the REPL."""

from __future__ import annotations

import argparse
import logging
import sys

from tinyscheme import __version__
from tinyscheme.config import get_recursion_limit
from tinyscheme.errors import SchemeError
from tinyscheme.interpreter import Interpreter
from tinyscheme.repl import Repl

logger = logging.getLogger("tinyscheme")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinyscheme")
    parser.add_argument("files", nargs="*", help="source files to load before the REPL starts")
    parser.add_argument("--no-repl", action="store_true", help="exit after loading files")
    parser.add_argument("--strict", action="store_true", help="raise on errors instead of yielding ()")
    parser.add_argument("-v", "--verbose", action="store_true", help="log loader activity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    interp = Interpreter(strict=True if args.strict else None)
    for path in args.files:
        try:
            interp.load(path)
        except SchemeError as err:
            # strict mode: a failing file stops the run
            logger.error("%s", err)
            return 1
    if not args.no_repl:
        Repl(interp).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
