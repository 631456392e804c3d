from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.errors import SchemeArityError
from minischeme.types.environment import Environment


def quote_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(quote datum): the datum exactly as parsed, Symbols and all."""
    if len(tail) != 1:
        raise SchemeArityError(f"malformed quote: expected 1 operand, got {len(tail)}")
    return tail[0]
