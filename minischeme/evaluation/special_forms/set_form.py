from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.errors import SchemeArityError, SchemeSyntaxError
from minischeme.types.symbol import Variable
from minischeme.types.environment import Environment


def set_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(set! var value): mutate the nearest existing binding; returns the value."""
    if len(tail) != 2:
        raise SchemeArityError(f"malformed set!: expected 2 operands, got {len(tail)}")
    var, val_expr = tail
    if not isinstance(var, Variable):
        raise SchemeSyntaxError(f"malformed set!: {var} is not an identifier")
    value = evaluate_fn(val_expr, env)
    env.assign(var.name, value)
    return value
