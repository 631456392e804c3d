import gc
import weakref

import pytest
from minischeme.types import display
from minischeme.types.environment import Environment
from minischeme.errors import SchemeUnboundVariable


def ev(itp, code: str) -> str:
    return display(itp.eval(code))


def test_free_variables_bound_at_definition_time(itp):
    itp.eval("(define x 10)")
    itp.eval("(define (f) x)")
    # the caller's x is invisible to f
    assert ev(itp, "(let ((x 20)) (f))") == "10"


def test_closure_outlives_its_defining_call(itp):
    itp.eval("(define (adder n) (lambda (x) (+ x n)))")
    itp.eval("(define add5 (adder 5))")
    itp.eval("(define add7 (adder 7))")
    assert ev(itp, "(list (add5 1) (add7 1))") == "(6 8)"


def test_counter_state_is_private_per_closure(itp):
    itp.eval("""
        (define (make-counter)
          (let ((n 0))
            (lambda () (set! n (+ n 1)) n)))
    """)
    itp.eval("(define c1 (make-counter))")
    itp.eval("(define c2 (make-counter))")
    itp.eval("(c1)")
    itp.eval("(c1)")
    assert ev(itp, "(list (c1) (c2))") == "(3 1)"


def test_mutation_is_visible_to_closures_sharing_a_frame(itp):
    itp.eval("""
        (define (make-cell)
          (let ((value 0))
            (cons (lambda () value)
                  (lambda (v) (set! value v)))))
    """)
    itp.eval("(define cell (make-cell))")
    itp.eval("((cdr cell) 42)")
    assert ev(itp, "((car cell))") == "42"


def test_inner_binding_shadows_outer(itp):
    itp.eval("(define x 'outer)")
    assert ev(itp, "((lambda (x) x) 'inner)") == "inner"
    assert ev(itp, "(let ((x 'let)) ((lambda () x)))") == "let"
    assert ev(itp, "x") == "outer"


def test_set_inside_closure_targets_captured_frame(itp):
    itp.eval("(define x 1)")
    itp.eval("(define setter (let ((x 2)) (lambda () (set! x 99))))")
    itp.eval("(setter)")
    assert ev(itp, "x") == "1"


def test_each_call_gets_a_fresh_frame(itp):
    itp.eval("(define (f a) (lambda () a))")
    itp.eval("(define g1 (f 1))")
    itp.eval("(define g2 (f 2))")
    assert ev(itp, "(list (g1) (g2))") == "(1 2)"


def test_recursive_local_closure_cycle_is_collected(itp):
    # closure -> frame -> closure: reclaimed by the cycle collector
    proc = itp.eval("(letrec ((loop (lambda (n) (if (= n 0) 'done (loop (- n 1)))))) loop)")
    frame_ref = weakref.ref(proc.env)
    assert display(itp.eval("(define tmp 0)")) == "tmp"
    del proc
    gc.collect()
    assert frame_ref() is None


def test_environment_chain_operations():
    outer = Environment()
    inner = Environment(outer=outer)
    outer.define("a", 1)
    inner.define("b", 2)
    assert inner.lookup("a") == 1
    assert inner.find("a") is outer
    assert inner.top_level() is outer
    inner.assign("a", 10)
    assert outer.lookup("a") == 10
    assert "a" not in inner.vars
    with pytest.raises(SchemeUnboundVariable):
        outer.lookup("b")
    with pytest.raises(SchemeUnboundVariable):
        inner.assign("c", 3)
    assert "c" not in inner
