from __future__ import annotations


class UndefinedType:
    """Result of forms with nothing meaningful to return (empty begin, one-armed if)."""

    __slots__ = ()

    def __str__(self): return "#<undef>"
    def __repr__(self): return "Undefined"


Undefined = UndefinedType()
