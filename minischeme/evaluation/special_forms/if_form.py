from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.errors import SchemeArityError
from minischeme.types.environment import Environment
from minischeme.types.predicates import is_truthy
from minischeme.types.undefined import Undefined


def if_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) not in (2, 3):
        raise SchemeArityError(
            f"malformed if: expected a test, a consequent and an optional alternative, got {len(tail)} operands"
        )

    if is_truthy(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Undefined
