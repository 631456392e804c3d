from minischeme import Value
from minischeme.types.atoms import TRUE, FALSE
from minischeme.types.environment import Environment
from minischeme.types.predicates import is_truthy


def and_form(tail: list[Value], env: Environment, evaluate_fn) -> Value:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If all operands are truthy, returns the
    value of the last operand. With zero operands, returns #t.
    """
    result: Value = TRUE
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not is_truthy(result):
            return result
    return result


def or_form(tail: list[Value], env: Environment, evaluate_fn) -> Value:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If none are truthy, returns the last value, which
    is #f. With zero operands, returns #f.
    """
    result: Value = FALSE
    for expr in tail:
        result = evaluate_fn(expr, env)
        if is_truthy(result):
            return result
    return result
