"""Command line entry point: run files or evaluate expressions."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from risp.config import color_enabled, get_recursion_limit
from risp.debug_utils.pprint import render_error, to_source
from risp.errors import RispError
from risp.interpreter import Interpreter
from risp.reader.parser import lex, TokenStream

logger = logging.getLogger(__name__)


def _interpreter(args: argparse.Namespace) -> Interpreter:
    return Interpreter(prelude=None if args.no_prelude else 'auto')


def run_command(args: argparse.Namespace) -> None:
    interp = _interpreter(args)
    for path in args.files:
        interp.eval_file(path)


def eval_command(args: argparse.Namespace) -> None:
    interp = _interpreter(args)
    for expr in TokenStream(lex(args.program)).parse_all():
        print(to_source(interp.eval_form(expr)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--debug", action="store_true", help="log macro expansions and definitions")
    common.add_argument("--no-prelude", action="store_true", help="start with primitives only")
    common.add_argument("--no-color", action="store_true", help="plain error reports")

    parser = argparse.ArgumentParser(prog="risp")
    parser.set_defaults(func=lambda _: parser.print_help())
    subparsers = parser.add_subparsers(dest="command")

    run = subparsers.add_parser("run", parents=[common], help="evaluate files in order")
    run.set_defaults(func=run_command)
    run.add_argument("files", nargs="+")

    eval_ = subparsers.add_parser("eval", parents=[common], help="evaluate an expression and print its value")
    eval_.set_defaults(func=eval_command)
    eval_.add_argument("program")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        limit = get_recursion_limit()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if limit is not None:
        sys.setrecursionlimit(limit)

    try:
        args.func(args)
    except RispError as e:
        color = not getattr(args, "no_color", False) and color_enabled(sys.stderr)
        print(render_error(e.form, e, color=color), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
