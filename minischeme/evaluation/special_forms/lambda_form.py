from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.errors import SchemeSyntaxError
from minischeme.types.environment import Environment
from minischeme.types.pair import Pair, from_iterable
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Variable


def check_unique(keyword: str, names: list[Variable], what: str = "parameter") -> None:
    """Reject a name bound twice in one binding construct."""
    seen: set[Variable] = set()
    for name in names:
        if name in seen:
            raise SchemeSyntaxError(f"malformed {keyword}: duplicate {what} {name}")
        seen.add(name)


def make_procedure(params: Value, body: list[Value], env: Environment, name: str | None = None) -> Procedure:
    """Build a closure over `env`; the body is not evaluated until the call."""
    if not (isinstance(params, Pair) and params.is_proper()):
        raise SchemeSyntaxError(f"malformed lambda: parameter list {params} is not a list")
    for p in params:
        if not isinstance(p, Variable):
            raise SchemeSyntaxError(f"malformed lambda: parameter {p} is not an identifier")
    check_unique("lambda", params.elements())
    if not body:
        raise SchemeSyntaxError("malformed lambda: missing body")
    return Procedure(params, from_iterable(body), env, name)


def lambda_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if not tail:
        raise SchemeSyntaxError("malformed lambda: missing parameter list")
    return make_procedure(tail[0], tail[1:], env)
