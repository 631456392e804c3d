"""Pairs and lists.

A list is a chain of Pairs ending in the `Null` singleton, the pair whose
head and tail are both absent. Everything that walks a chain does so with an
explicit loop so long lists never touch the recursion limit.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from minischeme import Value
from minischeme.errors import SchemeTypeError


class Pair:
    __slots__ = ("head", "tail")
    __match_args__ = ("head", "tail")

    def __init__(self, head: Value, tail: Value):
        self.head: Value = head
        self.tail: Value = tail

    def is_null(self) -> bool:
        return self.head is None and self.tail is None

    def is_proper(self) -> bool:
        """True if following `tail` terminates at the empty list."""
        node: Value = self
        while isinstance(node, Pair):
            if node.is_null():
                return True
            node = node.tail
        return False

    def __iter__(self) -> Iterator[Value]:
        node: Value = self
        while isinstance(node, Pair) and not node.is_null():
            yield node.head
            node = node.tail
        if not (isinstance(node, Pair) and node.is_null()):
            raise SchemeTypeError(f"expected list, got improper list {self}")

    def elements(self) -> list[Value]:
        """Return the items of a proper list; raises SchemeTypeError otherwise."""
        return list(self)

    def length(self) -> int:
        n = 0
        for _ in self:
            n += 1
        return n

    def __str__(self) -> str:
        if self.is_null():
            return "()"
        with StringIO() as buffer:
            buffer.write("(")
            node: Value = self
            first = True
            while isinstance(node, Pair) and not node.is_null():
                if not first:
                    buffer.write(" ")
                buffer.write(str(node.head))
                first = False
                node = node.tail
            if not (isinstance(node, Pair) and node.is_null()):
                buffer.write(" . ")
                buffer.write(str(node))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Pair<{self}>"


Null = Pair(None, None)


def from_iterable(values: Iterable[Value], tail: Value = Null) -> Value:
    """Build a list (or a dotted list when `tail` is not Null) from Python values."""
    items = list(values)
    result = tail
    for item in reversed(items):
        result = Pair(item, result)
    return result
