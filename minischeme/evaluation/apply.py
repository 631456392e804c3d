"""Application engine for minischeme.

This module centralizes procedure invocation for the interpreter:
- Closures: exact arity check, a fresh frame parented to the captured
  environment, parameters bound to the evaluated arguments, body evaluated
  in sequence.
- Builtins: the native function receives the evaluated argument values and
  the caller's environment.

`let` reuses `apply_procedure` for its synthetic closure call.
"""

from __future__ import annotations

from typing import Iterable

from minischeme import Value, EvaluatorFn
from minischeme.errors import SchemeArityError, SchemeTypeError
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure, Builtin
from minischeme.types.undefined import Undefined
from minischeme.types.predicates import type_name


def eval_sequence(forms: Iterable[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Evaluate forms in order and return the last result (Undefined if none)."""
    result: Value = Undefined
    for form in forms:
        result = evaluate_fn(form, env)
    return result


def bind_arguments(fn: Procedure, args: list[Value]) -> Environment:
    """Create the call frame for `fn`: a child of its captured environment."""
    formals = fn.formals()
    if len(formals) != len(args):
        raise SchemeArityError(
            f"wrong number of arguments for {fn}: expected {len(formals)}, got {len(args)}"
        )
    frame = Environment(outer=fn.env)
    for name, value in zip(formals, args):
        frame.define(name, value)
    return frame


def apply_procedure(
    fn: Value,
    args: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a closure or a Builtin to already-evaluated arguments.

    - For Procedure, bind a new frame and evaluate the body there.
    - For Builtin, invoke with the list of args and the runtime env.
    - Otherwise, raise a type error.
    """
    if isinstance(fn, Procedure):
        frame = bind_arguments(fn, args)
        return eval_sequence(fn.body, frame, evaluate_fn)
    if isinstance(fn, Builtin):
        return fn.fn(args, env)
    raise SchemeTypeError(f"invalid application: expected procedure, got {type_name(fn)}")
