from __future__ import annotations

from minischeme import Value
from minischeme.types.pair import Pair, Null
from minischeme.types.symbol import Variable


class Application:
    """An unevaluated call site: an operator and a proper list of argument forms."""

    __slots__ = ("operator", "arguments")
    __match_args__ = ("operator", "arguments")

    def __init__(self, operator: Value, arguments: Value = Null):
        self.operator: Value = operator
        self.arguments: Value = arguments

    def to_list(self) -> Pair:
        return Pair(self.operator, self.arguments)

    def __str__(self) -> str:
        if (
            isinstance(self.operator, Variable)
            and self.operator.name == "quote"
            and isinstance(self.arguments, Pair)
            and not self.arguments.is_null()
            and self.arguments.tail is Null
        ):
            return "'" + str(self.arguments.head)
        return str(self.to_list())

    def __repr__(self) -> str:
        return f"Application<{self}>"
