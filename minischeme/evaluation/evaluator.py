"""Core evaluator for the minischeme interpreter.

Variables resolve through the environment chain, Applications dispatch on
the evaluated operator (SpecialForm, procedure, or an error) and every other
value evaluates to itself.
"""

from __future__ import annotations

import logging

from minischeme import Value
from minischeme.errors import SchemeRuntimeError, SchemeTypeError
from minischeme.types.application import Application
from minischeme.types.atoms import Number, Boolean, String
from minischeme.types.environment import Environment
from minischeme.types.pair import Pair
from minischeme.types.procedure import Procedure, Builtin, SpecialForm
from minischeme.types.symbol import Symbol, Variable
from minischeme.types.undefined import UndefinedType
from minischeme.types.predicates import type_name
from minischeme.evaluation.apply import apply_procedure

logger = logging.getLogger(__name__)


def evaluate(expr: Value, env: Environment) -> Value:
    """Evaluate `expr` in `env`."""
    match expr:
        case Variable(name):
            return env.lookup(name)
        case Application():
            return evaluate_application(expr, env)
        case Number() | Boolean() | String() | Symbol() | Pair():
            return expr
        case Procedure() | Builtin() | SpecialForm() | UndefinedType():
            return expr
    raise SchemeRuntimeError(f"cannot evaluate {expr!r}")


def evaluate_application(app: Application, env: Environment) -> Value:
    operator = evaluate(app.operator, env)
    arguments = app.arguments
    if not (isinstance(arguments, Pair) and arguments.is_proper()):
        raise SchemeRuntimeError(f"proper list required for application: {app}")

    match operator:
        case SpecialForm(name=name, handler=handler):
            logger.debug("special form %s", name)
            return handler(arguments.elements(), env, evaluate)
        case Procedure() | Builtin():
            # Arguments are evaluated left to right in the caller's environment
            args = [evaluate(arg, env) for arg in arguments]
            return apply_procedure(operator, args, env, evaluate)
    raise SchemeTypeError(
        f"invalid application: {app.operator} is a {type_name(operator)}, not a procedure"
    )
