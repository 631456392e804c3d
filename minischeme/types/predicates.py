"""Type predicates and equality over the value family.

Each predicate is a tag check on the concrete class, total and side-effect free.
"""

from __future__ import annotations

from minischeme import Value
from minischeme.types.atoms import Number, Boolean, String
from minischeme.types.symbol import Symbol, Variable
from minischeme.types.pair import Pair
from minischeme.types.application import Application
from minischeme.types.procedure import Procedure, Builtin, SpecialForm
from minischeme.types.undefined import UndefinedType


def is_number(v: Value) -> bool:
    return isinstance(v, Number)


def is_boolean(v: Value) -> bool:
    return isinstance(v, Boolean)


def is_string(v: Value) -> bool:
    return isinstance(v, String)


def is_symbol(v: Value) -> bool:
    return isinstance(v, Symbol)


def is_variable(v: Value) -> bool:
    return isinstance(v, Variable)


def is_null(v: Value) -> bool:
    return isinstance(v, Pair) and v.is_null()


def is_pair(v: Value) -> bool:
    """A non-empty pair; the empty list is not a pair."""
    return isinstance(v, Pair) and not v.is_null()


def is_list(v: Value) -> bool:
    return isinstance(v, Pair) and v.is_proper()


def is_procedure(v: Value) -> bool:
    return isinstance(v, (Procedure, Builtin))


def is_special_form(v: Value) -> bool:
    return isinstance(v, SpecialForm)


def is_application(v: Value) -> bool:
    return isinstance(v, Application)


def is_undefined(v: Value) -> bool:
    return isinstance(v, UndefinedType)


def is_truthy(v: Value) -> bool:
    """Only #f is false; 0, "" and () are all true."""
    return not (isinstance(v, Boolean) and v.value is False)


def type_name(v: Value) -> str:
    """Short type label used in error messages."""
    match v:
        case Number():
            return "number"
        case Boolean():
            return "boolean"
        case String():
            return "string"
        case Symbol():
            return "symbol"
        case Pair() if v.is_null():
            return "null"
        case Pair():
            return "pair"
        case Procedure() | Builtin():
            return "procedure"
        case SpecialForm():
            return "syntax"
        case Variable():
            return "variable"
        case Application():
            return "application"
        case UndefinedType():
            return "undefined"
    return type(v).__name__


def is_eq(a: Value, b: Value) -> bool:
    """Identity: atoms by type and value, compound values by reference."""
    if a is b:
        return True
    match a:
        case Number() | Boolean() | Symbol():
            return a == b
        case Pair() if a.is_null():
            return isinstance(b, Pair) and b.is_null()
    return False


def is_equal(a: Value, b: Value) -> bool:
    """Structural equality, recursing into heads and looping along tails."""
    while True:
        if is_eq(a, b):
            return True
        match a:
            case String():
                return a == b
            case Pair() if isinstance(b, Pair) and not a.is_null() and not b.is_null():
                if not is_equal(a.head, b.head):
                    return False
                a, b = a.tail, b.tail
            case _:
                return False
