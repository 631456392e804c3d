import pytest
from minischeme.errors import SchemeArityError, SchemeDivisionByZero, SchemeTypeError
from minischeme.types import display


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(- (+ 10 5) (* 2 3))", "9"),
        ("(+ -1 5 -3)", "1"),
        ("(- -10 -5)", "-5"),
        ("(* -2 3)", "-6"),
        ("(/ -12 3)", "-4"),
        ("(+)", "0"),
        ("(*)", "1"),
        ("(- 1)", "1"),
        ("(/ 1)", "1"),
        ("(/ 100 (/ 4 2))", "50"),
        ("(+ 1 20 300 4000)", "4321"),
        ("( + 1 2 3 )", "6"),
        ("(- 3 (- 2 3) (+ 3 0))", "1"),
        ("(* (* 3 3) 3)", "27"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(/ 100 2 5)", "10"),
    ]
)
def test_arithmetic(itp, source, expected):
    assert display(itp.eval(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(/ -7 -2)", "3"),
        ("(quotient -7 2)", "-3"),
        ("(remainder -7 2)", "-1"),
        ("(remainder 7 -2)", "1"),
        ("(modulo -7 2)", "1"),
        ("(modulo 7 -2)", "-1"),
        ("(abs -4)", "4"),
    ]
)
def test_division_truncates_toward_zero(itp, source, expected):
    assert display(itp.eval(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", "#t"),
        ("(= 1 1 2)", "#f"),
        ("(< 1 2 3)", "#t"),
        ("(< 1 3 2)", "#f"),
        ("(<= 1 1 2)", "#t"),
        ("(> 3 2 1)", "#t"),
        ("(>= 3 3 4)", "#f"),
    ]
)
def test_comparisons(itp, source, expected):
    assert display(itp.eval(source)) == expected


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 10 2 0)", "(quotient 1 0)", "(modulo 3 0)"])
def test_division_by_zero(itp, source):
    with pytest.raises(SchemeDivisionByZero):
        itp.eval(source)


def test_arithmetic_type_errors(itp):
    with pytest.raises(SchemeTypeError, match="expected number, got string"):
        itp.eval('(+ 1 "2")')
    with pytest.raises(SchemeTypeError):
        itp.eval("(< 1 'a)")


def test_arithmetic_arity_errors(itp):
    with pytest.raises(SchemeArityError, match="expected at least 1, got 0"):
        itp.eval("(-)")
    with pytest.raises(SchemeArityError):
        itp.eval("(/)")
    with pytest.raises(SchemeArityError):
        itp.eval("(= 1)")
