from minischeme import EvaluatorFn
from minischeme import Value
from minischeme.errors import SchemeArityError, SchemeSyntaxError
from minischeme.types.application import Application
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol, Variable
from minischeme.evaluation.special_forms.lambda_form import make_procedure


def define_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (define name value)
    (define (name params...) body...)  => (define name (lambda (params...) body...))
    Binds in the current frame and returns the bound name as a Symbol.
    """
    if not tail:
        raise SchemeArityError("malformed define: missing name")

    target = tail[0]
    match target:
        case Variable(name):
            if len(tail) != 2:
                raise SchemeArityError(f"malformed define: expected 2 operands, got {len(tail)}")
            value = evaluate_fn(tail[1], env)
            if isinstance(value, Procedure) and value.name is None:
                value.name = name
        case Application(operator=Variable(name)):
            value = make_procedure(target.arguments, tail[1:], env, name)
        case _:
            raise SchemeSyntaxError(f"malformed define: {target} is not an identifier")

    env.define(name, value)
    return Symbol(name)
