import pytest
from minischeme import errors
from minischeme.evaluation.evaluator import evaluate
from minischeme.types import display
from minischeme.types.application import Application
from minischeme.types.atoms import Number, String, TRUE
from minischeme.types.pair import Null, from_iterable
from minischeme.types.procedure import Builtin, Procedure, SpecialForm
from minischeme.types.symbol import Symbol, Variable
from minischeme.types.undefined import Undefined

# -----------------------------------------------------
# Direct evaluation of hand-built values
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    for value in (Number(1), String("hello"), TRUE, Symbol("a"), Null, Undefined):
        assert evaluate(value, env) is value


def test_pairs_are_self_evaluating(env):
    lst = from_iterable([Number(1), Number(2)])
    assert evaluate(lst, env) is lst


def test_variable_lookup(env):
    env.define("x", Number(42))
    assert evaluate(Variable("x"), env) == Number(42)
    with pytest.raises(errors.SchemeUnboundVariable):
        evaluate(Variable("z"), env)


def test_variables_resolve_to_builtins_and_special_forms(env):
    assert isinstance(evaluate(Variable("car"), env), Builtin)
    assert isinstance(evaluate(Variable("if"), env), SpecialForm)


def test_application_of_builtin(env):
    app = Application(Variable("+"), from_iterable([Number(1), Number(2)]))
    assert evaluate(app, env) == Number(3)


def test_lambda_application(env):
    lam = evaluate(
        Application(
            Variable("lambda"),
            from_iterable([
                from_iterable([Variable("a"), Variable("b")]),
                Application(Variable("+"), from_iterable([Variable("a"), Variable("b")])),
            ]),
        ),
        env,
    )
    assert isinstance(lam, Procedure)
    assert evaluate(Application(lam, from_iterable([Number(2), Number(3)])), env) == Number(5)


def test_special_form_receives_unevaluated_operands(env):
    # (quote x) must hand back the Variable untouched, not look it up
    app = Application(Variable("quote"), from_iterable([Variable("never-bound")]))
    assert evaluate(app, env) == Variable("never-bound")


def test_dotted_application_is_a_runtime_error(env):
    app = Application(Variable("+"), from_iterable([Number(1)], Number(2)))
    with pytest.raises(errors.SchemeRuntimeError):
        evaluate(app, env)


def test_invalid_application(env):
    with pytest.raises(errors.SchemeTypeError, match="invalid application"):
        evaluate(Application(Number(1), from_iterable([Number(2)])), env)


def test_cannot_evaluate_foreign_objects(env):
    with pytest.raises(errors.SchemeRuntimeError):
        evaluate(object(), env)


# -----------------------------------------------------
# Source-level evaluation
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("()", "()"),
        ("10", "10"),
        ("123456789", "123456789"),
        ('"hi"', '"hi"'),
        ("#t", "#t"),
        ("(define x 5)", "x"),
        ("(begin)", "#<undef>"),
        ("(if #f 1)", "#<undef>"),
        ("car", "#<subr car>"),
        ("if", "#<syntax if>"),
        ("(lambda (x) x)", "#<closure #f>"),
        ("(begin (define (sq x) (* x x)) sq)", "#<closure sq>"),
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 (cons 2 '()))", "(1 2)"),
        ("(list 1 (list 2 3) '())", "(1 (2 3) ())"),
    ]
)
def test_display(itp, source, expected):
    assert display(itp.eval(source)) == expected


def test_define_and_lookup(itp):
    assert itp.eval("(define y 100)") == Symbol("y")
    assert itp.eval("y") == Number(100)


def test_definitions_persist_across_calls(itp):
    itp.eval("(define (twice f x) (f (f x)))")
    itp.eval("(define (inc n) (+ n 1))")
    assert itp.eval("(twice inc 5)") == Number(7)


def test_eval_returns_last_value_and_eval_all_returns_each(itp):
    assert itp.eval("1 2 3") == Number(3)
    assert itp.eval("") is Undefined
    assert itp.eval_all("(define a 1) (+ a 1)") == [Symbol("a"), Number(2)]


def test_operator_position_is_evaluated(itp):
    assert itp.eval("((if #t + *) 2 3)") == Number(5)
    assert itp.eval("((lambda (x) (* x x)) 7)") == Number(49)


def test_arguments_evaluated_left_to_right(itp, out):
    itp.eval('(list (print "a") (print "b") (print "c"))')
    assert out.getvalue() == "a\nb\nc\n"


def test_recursive_procedure(itp):
    itp.eval("""
        (define (fact n)
          (if (= n 0) 1 (* n (fact (- n 1)))))
    """)
    assert itp.eval("(fact 10)") == Number(3628800)


def test_errors(itp):
    with pytest.raises(errors.SchemeUnboundVariable):
        itp.eval("not_defined")
    with pytest.raises(errors.SchemeArityError):
        itp.eval("(define)")
    with pytest.raises(errors.SchemeTypeError):
        itp.eval("(5 1)")
    with pytest.raises(errors.SchemeSyntaxError):
        itp.eval("(+ 1 2 3")
