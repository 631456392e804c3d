from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.errors import SchemeSyntaxError
from minischeme.types.environment import Environment
from minischeme.types.pair import Pair
from minischeme.types.predicates import is_truthy
from minischeme.types.symbol import Variable
from minischeme.types.undefined import Undefined
from minischeme.evaluation.apply import eval_sequence

ELSE = Variable("else")


def _clauses(tail: list[Value]) -> list[list[Value]]:
    clauses = []
    for i, clause in enumerate(tail):
        if not (isinstance(clause, Pair) and clause.is_proper() and not clause.is_null()):
            raise SchemeSyntaxError(f"malformed cond: bad clause {clause}")
        items = clause.elements()
        if items[0] == ELSE and i != len(tail) - 1:
            raise SchemeSyntaxError("malformed cond: 'else' clause followed by more clauses")
        clauses.append(items)
    return clauses


def cond_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(cond (test body...) ... (else body...))

    The first clause whose test is not #f wins; its body runs in sequence and
    the last value is returned. A clause with no body returns its test value.
    No matching clause yields Undefined.
    """
    for test, *body in _clauses(tail):
        if test == ELSE:
            return eval_sequence(body, env, evaluate_fn)
        result = evaluate_fn(test, env)
        if is_truthy(result):
            return eval_sequence(body, env, evaluate_fn) if body else result
    return Undefined
