from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.types.environment import Environment
from minischeme.evaluation.apply import eval_sequence


def begin_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    return eval_sequence(tail, env, evaluate_fn)
