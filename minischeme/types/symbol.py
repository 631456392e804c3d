from __future__ import annotations
import sys


class Symbol:
    """Inert identifier data, produced by quoting."""

    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("symbol", self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Variable:
    """A reference to a binding, resolved against an Environment at evaluation time.

    A Variable never holds the value it names; the same Variable object may be
    evaluated against many different frames.
    """

    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Variable) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("variable", self.name))

    def __repr__(self):
        return f"Variable({self.name!r})"

    def __str__(self):
        return self.name
