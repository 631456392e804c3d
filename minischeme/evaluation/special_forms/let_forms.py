"""Binding forms: let, let* and letrec.

They differ only in when initializers run relative to the new frame:
- let:    all initializers in the outer scope, then one synthetic closure call
- let*:   one fresh frame, each initializer sees the bindings before it
- letrec: one fresh frame pre-bound to Undefined, so initializers (typically
          lambdas) can refer to each other and to themselves
"""

from __future__ import annotations

from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.errors import SchemeSyntaxError
from minischeme.types.environment import Environment
from minischeme.types.pair import Pair, from_iterable
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Variable
from minischeme.types.undefined import Undefined
from minischeme.evaluation.apply import apply_procedure, eval_sequence
from minischeme.evaluation.special_forms.lambda_form import check_unique, make_procedure


def _bindings(keyword: str, tail: list[Value]) -> tuple[list[tuple[Variable, Value]], list[Value]]:
    if len(tail) < 2:
        raise SchemeSyntaxError(f"malformed {keyword}: expected bindings and a body")
    spec, body = tail[0], tail[1:]
    if not (isinstance(spec, Pair) and spec.is_proper()):
        raise SchemeSyntaxError(f"malformed {keyword}: binding list {spec} is not a list")
    pairs = []
    for binding in spec:
        if not (isinstance(binding, Pair) and binding.is_proper() and binding.length() == 2):
            raise SchemeSyntaxError(f"malformed {keyword}: bad binding {binding}")
        var, init = binding.elements()
        if not isinstance(var, Variable):
            raise SchemeSyntaxError(f"malformed {keyword}: {var} is not an identifier")
        pairs.append((var, init))
    if keyword != "let*":
        check_unique(keyword, [var for var, _ in pairs], "binding")
    return pairs, body


def let_form(tail: list[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(let ((var init) ...) body...) == ((lambda (var ...) body...) init ...)"""
    pairs, body = _bindings("let", tail)
    closure = make_procedure(from_iterable(var for var, _ in pairs), body, env)
    args = [evaluate_fn(init, env) for _, init in pairs]
    return apply_procedure(closure, args, env, evaluate_fn)


def let_star_form(tail: list[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    pairs, body = _bindings("let*", tail)
    frame = Environment(outer=env)
    for var, init in pairs:
        frame.define(var.name, evaluate_fn(init, frame))
    return eval_sequence(body, frame, evaluate_fn)


def letrec_form(tail: list[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    pairs, body = _bindings("letrec", tail)
    frame = Environment(outer=env)
    for var, _ in pairs:
        frame.define(var.name, Undefined)
    for var, init in pairs:
        value = evaluate_fn(init, frame)
        if isinstance(value, Procedure) and value.name is None:
            value.name = var.name
        frame.define(var.name, value)
    return eval_sequence(body, frame, evaluate_fn)
