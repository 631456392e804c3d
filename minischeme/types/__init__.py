"""The closed family of values shared by code and data, plus environments."""

from minischeme.types.undefined import Undefined, UndefinedType
from minischeme.types.symbol import Symbol, Variable
from minischeme.types.atoms import Number, Boolean, String, TRUE, FALSE, boolean
from minischeme.types.pair import Pair, Null, from_iterable
from minischeme.types.application import Application
from minischeme.types.procedure import Procedure, Builtin, SpecialForm
from minischeme.types.environment import Environment

__all__ = [
    "Undefined",
    "UndefinedType",
    "Symbol",
    "Variable",
    "Number",
    "Boolean",
    "String",
    "TRUE",
    "FALSE",
    "boolean",
    "Pair",
    "Null",
    "from_iterable",
    "Application",
    "Procedure",
    "Builtin",
    "SpecialForm",
    "Environment",
    "display",
    "to_text",
]


def display(value) -> str:
    """Canonical text of a value, as written by `write` and shown by the REPL."""
    return str(value)


def to_text(value) -> str:
    """Text for `print`/`display`: strings without quotes, everything else as `display`."""
    return value.text if isinstance(value, String) else str(value)
