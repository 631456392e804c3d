"""Self-evaluating atoms: integers, booleans and strings."""

from __future__ import annotations


class Number:
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: int):
        self.value: int = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("number", self.value))

    def __repr__(self):
        return f"Number({self.value})"

    def __str__(self):
        return str(self.value)


class Boolean:
    """#t or #f. Use the TRUE/FALSE singletons (or `boolean()`) rather than constructing."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: bool):
        self.value: bool = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("boolean", self.value))

    def __repr__(self):
        return f"Boolean({self.value})"

    def __str__(self):
        return "#t" if self.value else "#f"


TRUE = Boolean(True)
FALSE = Boolean(False)


def boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


class String:
    __slots__ = ("text",)
    __match_args__ = ("text",)

    def __init__(self, text: str):
        self.text: str = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and self.text == other.text

    def __hash__(self) -> int:
        return hash(("string", self.text))

    def __repr__(self):
        return f"String({self.text!r})"

    def __str__(self):
        return '"' + "".join(_ESCAPES.get(c, c) for c in self.text) + '"'
