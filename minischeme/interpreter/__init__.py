from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, TextIO

from minischeme import Value
from minischeme.reader.lexer import TokenStream, lex
from minischeme.reader.parser import Parser
from minischeme.evaluation.evaluator import evaluate
from minischeme.types.environment import Environment
from minischeme.types.undefined import Undefined
from minischeme.builtin.env_builtin import register
from minischeme.debug_utils.dump import dump_ast

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating minischeme code.
    Owns the one persistent top-level Environment, so definitions made by
    one call are visible to the next.
    """

    def __init__(self, out: TextIO | None = None):
        self.env: Environment = Environment()
        register(self.env, out)

    @staticmethod
    def forms(code: str) -> Iterator[Value]:
        """Parse `code` lazily, one top-level form at a time."""
        return Parser(TokenStream(lex(code))).parse_all()

    def eval_iter(self, code: str) -> Iterator[Value]:
        """Parse and evaluate form by form, yielding each result.

        A syntax error in a later form surfaces only after earlier forms ran.
        """
        for form in self.forms(code):
            yield evaluate(form, self.env)

    def eval_all(self, code: str) -> list[Value]:
        return list(self.eval_iter(code))

    def eval(self, code: str) -> Value:
        """Evaluate every form in `code` and return the last result (Undefined if none)."""
        result: Value = Undefined
        for result in self.eval_iter(code):
            pass
        return result

    def eval_file(self, path: str | Path) -> Value:
        logger.debug("evaluating file %s", path)
        return self.eval(Path(path).read_text(encoding="utf-8"))

    def dump_ast(self, code: str) -> str:
        return "".join(dump_ast(form) for form in self.forms(code))
