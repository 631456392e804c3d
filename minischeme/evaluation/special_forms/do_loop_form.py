"""The (do ...) iteration form.

The loop is a small evaluator object that closes over the loop spec and
reuses the main evaluator to execute bodies in the loop frame.
"""

from __future__ import annotations

from minischeme import Value, EvaluatorFn
from minischeme.errors import SchemeSyntaxError
from minischeme.types.environment import Environment
from minischeme.types.pair import Pair
from minischeme.types.predicates import is_truthy
from minischeme.types.symbol import Variable
from minischeme.evaluation.special_forms.lambda_form import check_unique


class DoLoopEval:
    """Implements (do ((var init step?) ...) (test result...) body...).

    iterators: [(var, init, step-or-None) ...]
    end_clause: [test result*]
    body: forms executed for effect on each iteration
    """

    def __init__(
        self,
        iterators: list[tuple[Variable, Value, Value | None]],
        end_clause: list[Value],
        body: list[Value],
        evaluate_fn: EvaluatorFn,
    ):
        self.iterators = iterators
        self.end_clause = end_clause
        self.body = body
        self.evaluate_fn = evaluate_fn

    @classmethod
    def from_tail(cls, tail: list[Value], evaluate_fn: EvaluatorFn) -> DoLoopEval:
        if len(tail) < 2:
            raise SchemeSyntaxError("malformed do: expected iterators and a test clause")
        specs, end_clause, *body = tail
        if not (isinstance(specs, Pair) and specs.is_proper()):
            raise SchemeSyntaxError(f"malformed do: iterator list {specs} is not a list")
        iterators = []
        for spec in specs:
            if not (isinstance(spec, Pair) and spec.is_proper()):
                raise SchemeSyntaxError(f"malformed do: bad iterator {spec}")
            items = spec.elements()
            if len(items) > 3:
                raise SchemeSyntaxError(f"malformed do: bad update expr in {spec}")
            if len(items) < 2 or not isinstance(items[0], Variable):
                raise SchemeSyntaxError(f"malformed do: bad iterator {spec}")
            var, init, *step = items
            iterators.append((var, init, step[0] if step else None))
        check_unique("do", [var for var, _, _ in iterators], "variable")
        if not (isinstance(end_clause, Pair) and end_clause.is_proper() and not end_clause.is_null()):
            raise SchemeSyntaxError(f"malformed do: bad test clause {end_clause}")
        return cls(iterators, end_clause.elements(), body, evaluate_fn)

    def eval(self, env: Environment) -> Value:
        """Evaluate the do loop by stepping until the end test is true."""
        local_env = Environment(outer=env)

        # 1: initial values are computed in the outer scope
        inits = [(var.name, self.evaluate_fn(init, env)) for var, init, _ in self.iterators]
        for name, value in inits:
            local_env.define(name, value)

        test_expr, *exit_exprs = self.end_clause
        steps = [(var.name, step) for var, _, step in self.iterators if step is not None]

        # 2: loop
        while True:
            result = self.evaluate_fn(test_expr, local_env)
            if is_truthy(result):
                for expr in exit_exprs:
                    result = self.evaluate_fn(expr, local_env)
                return result

            for expr in self.body:
                self.evaluate_fn(expr, local_env)

            # Every step reads the pre-update bindings; rebind only afterwards
            updates = [(name, self.evaluate_fn(step, local_env)) for name, step in steps]
            for name, value in updates:
                local_env.define(name, value)


def do_loop_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Special form (do ...): evaluate a general iteration construct."""
    return DoLoopEval.from_tail(tail, evaluate_fn).eval(env)
