import pytest
from hypothesis import given, strategies as st

from wyas.errors import (
    Generic,
    TypeMismatch,
    UnknownProcedure,
    UnrecognizedForm,
    WrongArgumentCount,
)
from wyas.evaluation.evaluator import apply, evaluate
from wyas.types.result import Ok, Err
from wyas.types.values import Atom, List, DottedPair, Integer, Text, Boolean, EMPTY

# -----------------------------------------------------
# Self-evaluating literals
# -----------------------------------------------------

literals = (
    st.builds(Integer, st.integers())
    | st.builds(Text, st.text(max_size=20))
    | st.builds(Boolean, st.booleans())
)


@given(literals)
def test_self_evaluating_literals(value):
    assert evaluate(value) == Ok(value)


# -----------------------------------------------------
# Quote
# -----------------------------------------------------

def test_quote(read):
    assert evaluate(read("'(1 2 3)")) == Ok(List([Integer(1), Integer(2), Integer(3)]))
    assert evaluate(read("'a")) == Ok(Atom("a"))
    assert evaluate(read("(quote (a . b))")) == Ok(DottedPair([Atom("a")], Atom("b")))


def test_quoted_forms_are_not_evaluated(read):
    assert evaluate(read("'(+ 1 2)")) == Ok(List([Atom("+"), Integer(1), Integer(2)]))


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_with_wrong_arity(read, source):
    form = read(source)
    assert evaluate(form) == Err(UnrecognizedForm("Unrecognized special form", form))


# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_simple_expression(read):
    assert evaluate(read("(+ 1 2)")) == Ok(Integer(3))


def test_nested_arithmetic(read):
    assert evaluate(read("(- (+ 4 6 3) 3 5 2)")) == Ok(Integer(3))


def test_arity_checking(read):
    assert evaluate(read("(+ 2)")) == Err(WrongArgumentCount(2, [Integer(2)]))


def test_type_mismatch_propagation(read):
    assert evaluate(read('(+ 2 "two")')) == Err(TypeMismatch("number", Text("two")))


def test_unknown_procedure(read):
    result = evaluate(read("(what? 2)"))
    assert isinstance(result.error, UnknownProcedure)
    assert result.error.name == "what?"


def test_arguments_are_evaluated_before_lookup(read):
    result = evaluate(read("(what? (+ 1 \"x\"))"))
    assert result == Err(TypeMismatch("number", Text("x")))


def test_first_failing_argument_wins(read):
    result = evaluate(read("(+ (+ 1) (what? 2) (- \"a\" 1))"))
    assert result == Err(WrongArgumentCount(2, [Integer(1)]))


def test_evaluation_stops_at_first_failure(read):
    seen = []

    def spy(args):
        seen.append(args)
        return Ok(Integer(0))

    table = {"spy": spy}
    result = evaluate(read("(spy (spy) (oops) (spy 1))"), table)
    assert result == Err(UnknownProcedure("Unrecognized primitive function args", "oops"))
    assert seen == [[]]


def test_custom_primitive_table(read):
    table = {"first": lambda args: Ok(args[0])}
    assert evaluate(read("(first 7 8)"), table) == Ok(Integer(7))


def test_apply_looks_up_primitive():
    assert apply("*", [Integer(6), Integer(7)]) == Ok(Integer(42))
    assert apply("nope", []) == Err(UnknownProcedure("Unrecognized primitive function args", "nope"))


# -----------------------------------------------------
# Unrecognized shapes
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value",
    [
        Atom("x"),
        EMPTY,
        List([Integer(1), Integer(2)]),
        List([List([Atom("+")]), Integer(1)]),
        DottedPair([Atom("+")], Integer(1)),
    ]
)
def test_unrecognized_forms(value):
    assert evaluate(value) == Err(UnrecognizedForm("Unrecognized special form", value))


def test_deep_call_chain(read):
    depth = 150
    assert evaluate(read("(+ 1 " * depth + "0" + ")" * depth)) == Ok(Integer(depth))


def test_nesting_past_the_recursion_limit_is_an_error_value():
    value = Integer(1)
    for _ in range(5000):
        value = List([Atom("+"), Integer(1), value])
    assert evaluate(value) == Err(Generic("expression nested too deeply"))
