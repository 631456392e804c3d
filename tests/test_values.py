from minischeme.debug_utils.dump import dump_ast
from minischeme.reader.parser import parse
from minischeme.types import display, to_text
from minischeme.types.atoms import Number, String, TRUE, FALSE
from minischeme.types.pair import Null, Pair, from_iterable
from minischeme.types.symbol import Symbol, Variable
from minischeme.types.undefined import Undefined
from minischeme.types.environment import Environment
from minischeme.types import predicates as p


def test_long_lists_do_not_recurse():
    big = from_iterable(Number(i) for i in range(100_000))
    assert p.is_list(big)
    assert big.length() == 100_000
    text = display(big)
    assert text.startswith("(0 1 2 ")
    assert text.endswith(" 99999)")
    assert p.is_equal(big, from_iterable(Number(i) for i in range(100_000)))


def test_display_of_atoms():
    assert display(Number(-3)) == "-3"
    assert display(TRUE) == "#t"
    assert display(FALSE) == "#f"
    assert display(String('a "b"\n')) == '"a \\"b\\"\\n"'
    assert to_text(String('a "b"')) == 'a "b"'
    assert display(Null) == "()"
    assert display(Undefined) == "#<undef>"
    assert display(Pair(Number(1), Number(2))) == "(1 . 2)"


def test_symbols_and_variables_are_distinct():
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != Variable("a")
    assert p.is_symbol(Symbol("a")) and not p.is_symbol(Variable("a"))


def test_only_false_is_falsy():
    for value in (Number(0), String(""), Null, Undefined, Symbol("nil")):
        assert p.is_truthy(value)
    assert not p.is_truthy(FALSE)


def test_improper_list_predicates():
    dotted = Pair(Number(1), Number(2))
    assert p.is_pair(dotted)
    assert not p.is_list(dotted)
    assert p.is_list(Null)
    assert not p.is_pair(Null)


def test_dump_ast_tree():
    (form,) = parse("(f 'a \"s\" #t)")
    assert dump_ast(form) == (
        "Application\n"
        "  Variable(f)\n"
        "  Application\n"
        "    Variable(quote)\n"
        "    Symbol(a)\n"
        '  String("s")\n'
        "  Boolean(#t)\n"
    )


def test_dump_ast_quoted_list():
    (form,) = parse("'(1 (2) . x)")
    assert dump_ast(form, indent=1) == (
        "  Application\n"
        "    Variable(quote)\n"
        "    Pair\n"
        "      Number(1)\n"
        "      Pair\n"
        "        Number(2)\n"
        "      .\n"
        "      Symbol(x)\n"
    )


def test_dump_ast_long_quoted_list_is_flat():
    (form,) = parse("'(" + " ".join(str(i) for i in range(5000)) + ")")
    lines = dump_ast(form).splitlines()
    assert len(lines) == 5003
    assert lines[2] == "  Pair"
    assert lines[-1] == "    Number(4999)"


def test_environment_repr_shows_frame_names_and_depth():
    outer = Environment()
    outer.define("b", 1)
    outer.define("a", 2)
    inner = Environment(outer=outer)
    inner.define("x", 3)
    assert repr(outer) == "<Environment ['a', 'b'] depth=0>"
    assert repr(inner) == "<Environment ['x'] depth=1>"
