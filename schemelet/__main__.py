"""Command-line entry point.

    schemelet "(+ 2 3)"     evaluate one expression and print the result
    schemelet               read one expression per line from stdin
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from schemelet.config import get_log_level
from schemelet.interpreter import read_eval

PROMPT = "schemelet> "


def repl(stdin: TextIO, stdout: TextIO) -> None:
    """Evaluate each non-blank line of `stdin` as its own expression."""
    interactive = stdin.isatty()
    while True:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        code = line.strip()
        if not code:
            continue
        print(read_eval(code), file=stdout)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="schemelet",
        description="Evaluate a single Scheme-style expression.",
        epilog="Atoms may start with '-': an unrecognized dash argument is taken as the "
               "expression, and '--' forces the next argument to be one (e.g. -- -v).",
    )
    parser.add_argument("expr", nargs="?", help="expression to evaluate; omit to read lines from stdin")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    args, extra = parser.parse_known_args(argv)

    # Dash-prefixed atoms such as -x look like options to argparse
    if extra:
        if args.expr is not None or len(extra) > 1:
            parser.error(f"unrecognized arguments: {' '.join(extra)}")
        args.expr = extra[0]

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.expr is None:
        repl(sys.stdin, sys.stdout)
    else:
        print(read_eval(args.expr))
    return 0


if __name__ == "__main__":
    sys.exit(main())
