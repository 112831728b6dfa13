"""Interactive read-eval-print loop and file runner for Kappa."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import Optional, Sequence, TextIO

from kappa import __version__
from kappa.config import get_log_level, get_recursion_limit, parse_log_level
from kappa.errors import KappaError
from kappa.interpreter import Interpreter
from kappa.printer import to_text

logger = logging.getLogger(__name__)

BANNER = "Kappa REPL"
PROMPT = "> "


def describe_error(exc: BaseException) -> str:
    if isinstance(exc, RecursionError):
        return "maximum recursion depth exceeded"
    return str(exc)


def eval_line(interp: Interpreter, line: str, out: TextIO) -> bool:
    """Evaluate one line, printing each result or the error. Returns success."""
    try:
        for result in interp.eval_all(line):
            print(to_text(result), file=out)
    except (KappaError, RecursionError) as exc:
        logger.warning("evaluation failed: %s", describe_error(exc))
        print(f"Error: {describe_error(exc)}", file=out)
        return False
    return True


def run_repl(interp: Interpreter, stdin: TextIO, stdout: TextIO) -> None:
    print(BANNER, file=stdout)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:  # EOF (Ctrl-D)
            stdout.write("\n")
            break
        if not line.strip():
            continue
        eval_line(interp, line, stdout)


def run_files(interp: Interpreter, paths: Sequence[str], echo: bool, stdout: TextIO, stderr: TextIO) -> int:
    for path in paths:
        try:
            with open(path, encoding="utf-8") as f:
                source = f.read()
        except OSError as exc:
            print(f"Error: cannot read {path}: {exc.strerror}", file=stderr)
            return 1
        logger.info("running %s", path)
        try:
            for result in interp.eval_all(source):
                if echo:
                    print(to_text(result), file=stdout)
        except (KappaError, RecursionError) as exc:
            print(f"Error: {path}: {describe_error(exc)}", file=stderr)
            return 1
    return 0


def build_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="kappa", description="Kappa Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to evaluate in order")
    parser.add_argument("-e", "--eval", dest="expr", default=None,
                        help="evaluate EXPR, print its result(s) and exit")
    parser.add_argument("--print", dest="echo", action="store_true",
                        help="print the result of every top-level expression in FILES")
    parser.add_argument("--log-level", default=None,
                        help="logging level (overrides KAPPA_LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None,
         stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        level = parse_log_level(args.log_level) if args.log_level else get_log_level()
        limit = get_recursion_limit()
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if args.expr is not None:
        return 0 if eval_line(interp, args.expr, stdout) else 1
    if args.files:
        return run_files(interp, args.files, args.echo, stdout, stderr)
    run_repl(interp, stdin, stdout)
    return 0
