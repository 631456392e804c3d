"""Indented tree view of parsed forms, one node per line.

    (+ 1 (f 'a))  =>  Application
                        Variable(+)
                        Number(1)
                        Application
                          Variable(f)
                          Application
                            Variable(quote)
                            Symbol(a)
"""

from __future__ import annotations

from io import StringIO

from minischeme import Value
from minischeme.types.application import Application
from minischeme.types.atoms import Number, Boolean, String
from minischeme.types.pair import Pair
from minischeme.types.symbol import Symbol, Variable

INDENT = "  "


def _label(node: Value) -> str:
    match node:
        case Number(value):
            return f"Number({value})"
        case Boolean():
            return f"Boolean({node})"
        case String():
            return f"String({node})"
        case Symbol(name):
            return f"Symbol({name})"
        case Variable(name):
            return f"Variable({name})"
    return str(node)


def _write(node: Value, depth: int, buffer: StringIO) -> None:
    pad = INDENT * depth
    match node:
        case Application(operator, arguments):
            buffer.write(f"{pad}Application\n")
            _write(operator, depth + 1, buffer)
            while isinstance(arguments, Pair) and not arguments.is_null():
                _write(arguments.head, depth + 1, buffer)
                arguments = arguments.tail
            if not isinstance(arguments, Pair):
                buffer.write(f"{pad}{INDENT}.\n")
                _write(arguments, depth + 1, buffer)
        case Pair() if node.is_null():
            buffer.write(f"{pad}Null\n")
        case Pair():
            buffer.write(f"{pad}Pair\n")
            while isinstance(node, Pair) and not node.is_null():
                _write(node.head, depth + 1, buffer)
                node = node.tail
            if not isinstance(node, Pair):
                buffer.write(f"{pad}{INDENT}.\n")
                _write(node, depth + 1, buffer)
        case _:
            buffer.write(f"{pad}{_label(node)}\n")


def dump_ast(node: Value, indent: int = 0) -> str:
    with StringIO() as buffer:
        _write(node, indent, buffer)
        return buffer.getvalue()
