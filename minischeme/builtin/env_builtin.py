"""Built-in procedures for the minischeme top-level environment.

This module defines core arithmetic, comparison, list processing, equality,
predicates, string/symbol conversions and the registration helper that
installs them (together with the special forms and I/O procedures) into a
top-level frame.

Every builtin has the signature fn(args, env) where `args` holds the already
evaluated operands. Argument count and types are checked before use so that
errors name the call site: "expected N, got M" / "expected <type>, got <type>".
"""
from __future__ import annotations

import operator
from typing import Callable, TextIO

from minischeme import Value
from minischeme.errors import SchemeArityError, SchemeDivisionByZero, SchemeTypeError
from minischeme.types.atoms import Number, String, TRUE, FALSE, boolean
from minischeme.types.environment import Environment
from minischeme.types.pair import Pair, Null, from_iterable
from minischeme.types.procedure import Builtin
from minischeme.types.symbol import Symbol
from minischeme.types import predicates as p
from minischeme.evaluation import special_forms
from minischeme.reader.lexer import INTEGER_RE


# -------------------------------
# Validation helpers
# -------------------------------
def check_arity(name: str, args: list[Value], exactly: int | None = None, at_least: int = 0) -> None:
    if exactly is not None and len(args) != exactly:
        raise SchemeArityError(f"{name}: wrong number of arguments: expected {exactly}, got {len(args)}")
    if len(args) < at_least:
        raise SchemeArityError(
            f"{name}: wrong number of arguments: expected at least {at_least}, got {len(args)}"
        )


def check_type(name: str, value: Value, predicate: Callable[[Value], bool], expected: str) -> None:
    if not predicate(value):
        raise SchemeTypeError(f"{name}: expected {expected}, got {p.type_name(value)} {value}")


def _integers(name: str, args: list[Value]) -> list[int]:
    for a in args:
        check_type(name, a, p.is_number, "number")
    return [a.value for a in args]


# -------------------------------
# Arithmetic
# -------------------------------
def truncate_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise SchemeDivisionByZero("division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def add(args: list[Value], env: Environment) -> Value:
    """Return the sum of all arguments; (+) is 0."""
    return Number(sum(_integers("+", args)))


def sub(args: list[Value], env: Environment) -> Value:
    """Subtract all subsequent numbers from the first; a single argument is returned as is."""
    check_arity("-", args, at_least=1)
    first, *rest = _integers("-", args)
    for x in rest:
        first -= x
    return Number(first)


def mul(args: list[Value], env: Environment) -> Value:
    """Return the product of all arguments; (*) is 1."""
    result = 1
    for x in _integers("*", args):
        result *= x
    return Number(result)


def div(args: list[Value], env: Environment) -> Value:
    """Divide left-to-right with truncation toward zero; a single argument is returned as is."""
    check_arity("/", args, at_least=1)
    first, *rest = _integers("/", args)
    for x in rest:
        first = truncate_div(first, x)
    return Number(first)


def quotient(args: list[Value], env: Environment) -> Value:
    check_arity("quotient", args, exactly=2)
    a, b = _integers("quotient", args)
    return Number(truncate_div(a, b))


def remainder(args: list[Value], env: Environment) -> Value:
    """(remainder n d) has the sign of n."""
    check_arity("remainder", args, exactly=2)
    a, b = _integers("remainder", args)
    return Number(a - b * truncate_div(a, b))


def modulo(args: list[Value], env: Environment) -> Value:
    """(modulo n d) has the sign of d."""
    check_arity("modulo", args, exactly=2)
    a, b = _integers("modulo", args)
    if b == 0:
        raise SchemeDivisionByZero("division by zero")
    return Number(a % b)


def absolute(args: list[Value], env: Environment) -> Value:
    check_arity("abs", args, exactly=1)
    (a,) = _integers("abs", args)
    return Number(abs(a))


def _comparison(name: str, op: Callable[[int, int], bool]) -> Callable[[list[Value], Environment], Value]:
    def compare(args: list[Value], env: Environment) -> Value:
        check_arity(name, args, at_least=2)
        numbers = _integers(name, args)
        return boolean(all(op(a, b) for a, b in zip(numbers, numbers[1:])))

    compare.__doc__ = f"({name} a b ...) chained over adjacent arguments."
    return compare


# -------------------------------
# Lists
# -------------------------------
def car(args: list[Value], env: Environment) -> Value:
    check_arity("car", args, exactly=1)
    check_type("car", args[0], p.is_pair, "pair")
    return args[0].head


def cdr(args: list[Value], env: Environment) -> Value:
    check_arity("cdr", args, exactly=1)
    check_type("cdr", args[0], p.is_pair, "pair")
    return args[0].tail


def cons(args: list[Value], env: Environment) -> Value:
    check_arity("cons", args, exactly=2)
    return Pair(args[0], args[1])


def make_list(args: list[Value], env: Environment) -> Value:
    return from_iterable(args)


def length(args: list[Value], env: Environment) -> Value:
    check_arity("length", args, exactly=1)
    check_type("length", args[0], p.is_list, "list")
    return Number(args[0].length())


def append(args: list[Value], env: Environment) -> Value:
    """(append l1 l2 ... last): copies every list but the last, which becomes the tail."""
    if not args:
        return Null
    *lists, last = args
    items: list[Value] = []
    for lst in lists:
        check_type("append", lst, p.is_list, "list")
        items.extend(lst)
    return from_iterable(items, last)


def reverse(args: list[Value], env: Environment) -> Value:
    check_arity("reverse", args, exactly=1)
    check_type("reverse", args[0], p.is_list, "list")
    return from_iterable(reversed(args[0].elements()))


# -------------------------------
# Equality and logic
# -------------------------------
def eq(args: list[Value], env: Environment) -> Value:
    check_arity("eq?", args, exactly=2)
    return boolean(p.is_eq(args[0], args[1]))


def equal(args: list[Value], env: Environment) -> Value:
    check_arity("equal?", args, exactly=2)
    return boolean(p.is_equal(args[0], args[1]))


def logical_not(args: list[Value], env: Environment) -> Value:
    check_arity("not", args, exactly=1)
    return boolean(not p.is_truthy(args[0]))


def _predicate(name: str, test: Callable[[Value], bool]) -> Callable[[list[Value], Environment], Value]:
    def predicate(args: list[Value], env: Environment) -> Value:
        check_arity(name, args, exactly=1)
        return TRUE if test(args[0]) else FALSE

    predicate.__doc__ = f"({name} obj)"
    return predicate


# -------------------------------
# Strings and symbols
# -------------------------------
def symbol_to_string(args: list[Value], env: Environment) -> Value:
    check_arity("symbol->string", args, exactly=1)
    check_type("symbol->string", args[0], p.is_symbol, "symbol")
    return String(args[0].name)


def string_to_symbol(args: list[Value], env: Environment) -> Value:
    check_arity("string->symbol", args, exactly=1)
    check_type("string->symbol", args[0], p.is_string, "string")
    return Symbol(args[0].text)


def number_to_string(args: list[Value], env: Environment) -> Value:
    check_arity("number->string", args, exactly=1)
    check_type("number->string", args[0], p.is_number, "number")
    return String(str(args[0].value))


def string_to_number(args: list[Value], env: Environment) -> Value:
    """Parse a decimal integer; #f when the text is not one."""
    check_arity("string->number", args, exactly=1)
    check_type("string->number", args[0], p.is_string, "string")
    text = args[0].text
    if not INTEGER_RE.fullmatch(text):
        return FALSE
    return Number(int(text))


def string_append(args: list[Value], env: Environment) -> Value:
    for a in args:
        check_type("string-append", a, p.is_string, "string")
    return String("".join(a.text for a in args))


def string_length(args: list[Value], env: Environment) -> Value:
    check_arity("string-length", args, exactly=1)
    check_type("string-length", args[0], p.is_string, "string")
    return Number(len(args[0].text))


BUILTINS: dict[str, Callable[[list[Value], Environment], Value]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "quotient": quotient,
    "remainder": remainder,
    "modulo": modulo,
    "abs": absolute,
    "=": _comparison("=", operator.eq),
    "<": _comparison("<", operator.lt),
    "<=": _comparison("<=", operator.le),
    ">": _comparison(">", operator.gt),
    ">=": _comparison(">=", operator.ge),
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "list": make_list,
    "length": length,
    "append": append,
    "reverse": reverse,
    "eq?": eq,
    "equal?": equal,
    "not": logical_not,
    "null?": _predicate("null?", p.is_null),
    "number?": _predicate("number?", p.is_number),
    "boolean?": _predicate("boolean?", p.is_boolean),
    "string?": _predicate("string?", p.is_string),
    "symbol?": _predicate("symbol?", p.is_symbol),
    "procedure?": _predicate("procedure?", p.is_procedure),
    "pair?": _predicate("pair?", p.is_pair),
    "list?": _predicate("list?", p.is_list),
    "symbol->string": symbol_to_string,
    "string->symbol": string_to_symbol,
    "number->string": number_to_string,
    "string->number": string_to_number,
    "string-append": string_append,
    "string-length": string_length,
}


def register(env: Environment, out: TextIO | None = None) -> None:
    """Install special forms, builtin procedures and I/O procedures into `env`."""
    from minischeme.builtin.io_builtin import io_builtins

    special_forms.install(env)
    env.update({name: Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.update({name: Builtin(name, fn) for name, fn in io_builtins(out).items()})
