"""Command line front end: run a Peano program file and print its result.

    peano program.peano [--prelude] [--strict] [--tokens] [--ast] [--no-color]

Every failure is reported on stderr and exits with status 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from peano.config import get_recursion_limit
from peano.debug_utils.pprint import format_program
from peano.diagnostics import report
from peano.errors import PeanoError
from peano.evaluation.evaluator import evaluate
from peano.interpreter import Interpreter
from peano.reader.scanner import lex
from peano.types.nat import nat_to_num


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="peano",
        description="Evaluate a program over unary natural numbers.",
    )
    parser.add_argument("file", help="program file to run")
    parser.add_argument("--prelude", action="store_true",
                        help="load the standard prelude (pred, add, sub, mul, max)")
    parser.add_argument("--strict", action="store_true",
                        help="treat unbound names, unknown functions and arity mismatches as errors")
    parser.add_argument("--tokens", action="store_true", help="print the token stream first")
    parser.add_argument("--ast", action="store_true", help="print the lowered program first")
    parser.add_argument("--no-color", action="store_true", help="plain error output")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # nested calls and conditionals are parsed recursively
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, get_recursion_limit()))
    try:
        return _run(args)
    finally:
        sys.setrecursionlimit(previous)


def _run(args: argparse.Namespace) -> int:
    color = not args.no_color

    try:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()
    except OSError as ex:
        print(report(ex, path=args.file, color=color), file=sys.stderr)
        return 1

    try:
        itp = Interpreter(prelude="auto" if args.prelude else None,
                          strict=True if args.strict else None)
    except (PeanoError, OSError) as ex:
        print(report(ex, color=color), file=sys.stderr)
        return 1

    try:
        if args.tokens:
            for token in lex(source):
                print(f"{token.type:<8} {token.value if token.value is not None else ''}".rstrip())

        program = itp.compile(source)
        if args.ast:
            print(format_program(program))

        if program.expression is None:
            print("the program has no final expression")
            return 0

        result = evaluate(program.expression, program.vars, program.funcs, strict=itp.strict)
    except PeanoError as ex:
        print(report(ex, source, args.file, color=color), file=sys.stderr)
        return 1
    except RecursionError:
        ex = PeanoError("program nesting too deep (raise PEANO_RECURSION_LIMIT)")
        print(report(ex, path=args.file, color=color), file=sys.stderr)
        return 1

    print(f"The result is {nat_to_num(result)}")
    return 0
