"""Command-line driver: run files, evaluate expressions, or start a REPL.

    minischeme prog.scm other.scm      # halt on the first error
    minischeme -k prog.scm             # report errors and keep going
    minischeme -e "(+ 1 2)"            # evaluate and print
    minischeme                         # interactive read-eval-print loop
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from minischeme import __version__
from minischeme.config import get_log_level
from minischeme.debug_utils.dump import dump_ast
from minischeme.errors import SchemeError, SchemeSyntaxError
from minischeme.evaluation.evaluator import evaluate
from minischeme.interpreter import Interpreter
from minischeme.reader.lexer import TokenKind, lex
from minischeme.types import display
from minischeme.types.undefined import UndefinedType

logger = logging.getLogger("minischeme")

PROMPT = "> "
CONTINUATION_PROMPT = ". "

# Errors a top-level form may end with; the driver reports them instead of crashing.
REPORTABLE = (SchemeError, RecursionError)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minischeme", description="A small Scheme interpreter")
    parser.add_argument("files", nargs="*", help="source files to evaluate in order")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate EXPR and print its value")
    parser.add_argument(
        "-k", "--keep-going", action="store_true",
        help="report an error and continue with the next top-level form",
    )
    parser.add_argument("--dump-ast", action="store_true", help="print each parsed form as a tree")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def report(err: BaseException, err_out: TextIO) -> None:
    if isinstance(err, RecursionError):
        message = "maximum recursion depth exceeded"
    else:
        message = str(err)
    logger.debug("error: %r", err)
    err_out.write(f"Error: {message}\n")


def needs_more(code: str) -> bool:
    """True while `code` has unclosed parentheses or an unterminated string."""
    depth = 0
    try:
        for token in lex(code):
            if token.kind is TokenKind.LPAREN:
                depth += 1
            elif token.kind is TokenKind.RPAREN:
                depth -= 1
    except SchemeSyntaxError as e:
        return str(e).startswith("unterminated string")
    return depth > 0


def run_source(
    itp: Interpreter,
    code: str,
    keep_going: bool = False,
    dump: bool = False,
    out: TextIO | None = None,
    err_out: TextIO | None = None,
) -> bool:
    """Evaluate every top-level form of `code`; returns False if any form failed.

    With `keep_going` an evaluation error is reported and the next form runs.
    A parse error always ends the source, since parsing cannot resume.
    Syntax errors raised while evaluating a form count as evaluation errors.
    """
    out = out or sys.stdout
    err_out = err_out or sys.stderr
    forms = itp.forms(code)
    ok = True
    while True:
        try:
            form = next(forms, None)
        except SchemeSyntaxError as e:
            report(e, err_out)
            return False
        if form is None:
            return ok
        try:
            if dump:
                out.write(dump_ast(form))
            evaluate(form, itp.env)
        except REPORTABLE as e:
            report(e, err_out)
            ok = False
            if not keep_going:
                return False


def repl(
    itp: Interpreter,
    inp: TextIO | None = None,
    out: TextIO | None = None,
    err_out: TextIO | None = None,
    dump: bool = False,
) -> int:
    """Read-eval-print until end of input. Errors are reported, never fatal."""
    inp = inp or sys.stdin
    out = out or sys.stdout
    err_out = err_out or sys.stderr
    buffer = ""
    while True:
        out.write(CONTINUATION_PROMPT if buffer else PROMPT)
        out.flush()
        line = inp.readline()
        if not line:
            out.write("\n")
            return 0
        buffer += line
        if needs_more(buffer):
            continue
        code, buffer = buffer, ""
        try:
            for form in itp.forms(code):
                if dump:
                    out.write(dump_ast(form))
                result = evaluate(form, itp.env)
                if not isinstance(result, UndefinedType):
                    out.write(display(result) + "\n")
        except REPORTABLE as e:
            report(e, err_out)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    itp = Interpreter()

    status = 0
    for path in args.files:
        try:
            code = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            sys.stderr.write(f"Error: cannot read {path}: {e.strerror}\n")
            return 1
        logger.debug("running %s", path)
        if not run_source(itp, code, keep_going=args.keep_going, dump=args.dump_ast):
            status = 1
            if not args.keep_going:
                return status

    if args.expr is not None:
        try:
            for form in itp.forms(args.expr):
                if args.dump_ast:
                    sys.stdout.write(dump_ast(form))
                result = evaluate(form, itp.env)
                if not isinstance(result, UndefinedType):
                    sys.stdout.write(display(result) + "\n")
        except REPORTABLE as e:
            report(e, sys.stderr)
            return 1
    elif not args.files:
        return repl(itp, dump=args.dump_ast)
    return status
