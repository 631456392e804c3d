"""Output and file-loading builtins.

These close over the interpreter's output stream, so they are built per
interpreter by `io_builtins(out)` rather than defined at module level.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from minischeme import Value
from minischeme.config import resolve_load_path
from minischeme.errors import SchemeError
from minischeme.types import display, to_text
from minischeme.types.atoms import TRUE
from minischeme.types.environment import Environment
from minischeme.types.undefined import Undefined
from minischeme.types import predicates as p
from minischeme.builtin.env_builtin import check_arity, check_type

logger = logging.getLogger(__name__)


def load_file(path: str, env: Environment) -> Value:
    """Read, parse and evaluate every form of a file in the top-level frame of `env`."""
    from minischeme.evaluation.evaluator import evaluate
    from minischeme.reader.lexer import TokenStream, lex
    from minischeme.reader.parser import Parser

    resolved = resolve_load_path(path)
    logger.debug("loading %s", resolved)
    try:
        code = resolved.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemeError(f"load: cannot read {path}: {e.strerror}") from e

    top = env.top_level()
    result: Value = Undefined
    for form in Parser(TokenStream(lex(code))).parse_all():
        result = evaluate(form, top)
    return result


def io_builtins(out: TextIO | None = None) -> dict[str, Callable[[list[Value], Environment], Value]]:
    def stream() -> TextIO:
        # Resolved at call time so a replaced sys.stdout (e.g. under capsys) is honoured
        return out if out is not None else sys.stdout

    def print_(args: list[Value], env: Environment) -> Value:
        """(print obj ...) writes each object (strings unquoted) then a newline."""
        stream().write("".join(to_text(a) for a in args) + "\n")
        return Undefined

    def display_(args: list[Value], env: Environment) -> Value:
        check_arity("display", args, exactly=1)
        stream().write(to_text(args[0]))
        return Undefined

    def write(args: list[Value], env: Environment) -> Value:
        check_arity("write", args, exactly=1)
        stream().write(display(args[0]))
        return Undefined

    def newline(args: list[Value], env: Environment) -> Value:
        check_arity("newline", args, exactly=0)
        stream().write("\n")
        return Undefined

    def load(args: list[Value], env: Environment) -> Value:
        check_arity("load", args, exactly=1)
        check_type("load", args[0], p.is_string, "string")
        load_file(args[0].text, env)
        return TRUE

    return {
        "print": print_,
        "display": display_,
        "write": write,
        "newline": newline,
        "load": load,
    }
