"""Callable values: user closures, native procedures and special forms."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from minischeme import Value
from minischeme.types.pair import Pair

if TYPE_CHECKING:
    from minischeme.types.environment import Environment


class Procedure:
    """A closure: parameter list, body sequence and the environment captured by `lambda`."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self, params: Pair, body: Pair, env: Environment, name: str | None = None
    ):
        self.params: Pair = params
        self.body: Pair = body
        self.env: Environment = env
        self.name: str | None = name

    def formals(self) -> list[str]:
        return [str(p) for p in self.params]

    def __str__(self) -> str:
        return f"#<closure {self.name or '#f'}>"

    def __repr__(self) -> str:
        return f"Procedure({self.name or 'lambda'} {self.params})"


class Builtin:
    """A native procedure: fn(args, env) receives already-evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[Value], "Environment"], Value]):
        self.name = name
        self.fn = fn

    def __str__(self) -> str:
        return f"#<subr {self.name}>"

    def __repr__(self) -> str:
        return f"Builtin({self.name})"


class SpecialForm:
    """A keyword whose handler receives its operands unevaluated."""

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: Callable[..., Value]):
        self.name = name
        self.handler = handler

    def __str__(self) -> str:
        return f"#<syntax {self.name}>"

    def __repr__(self) -> str:
        return f"SpecialForm({self.name})"
