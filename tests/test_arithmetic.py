import pytest

from wyas.errors import Generic, TypeMismatch, WrongArgumentCount
from wyas.evaluation.primitives import (
    PRIMITIVES,
    numeric_binop,
    quotient,
    remainder,
    unpack_number,
)
from wyas.types.result import Ok, Err
from wyas.types.values import Atom, List, Integer, Text, Boolean


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(- 15 5 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(/ 100 5 2)", "10"),
        ("(/ 7 2)", "3"),
        ("(remainder 17 5)", "2"),
        ("(remainder 100 7 3)", "2"),
        ("(- 3 10)", "-7"),
        ("(/ (- 3 10) 2)", "-3"),
        ("(remainder (- 0 7) 2)", "-1"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(- (+ 4 6 3) 3 5 2)", "3"),
        ('(+ 2 "40")', "42"),
        ("(+ 2 '(40))", "42"),
        ("(+ 2 '((40)))", "42"),
        ("(* 99999999999 99999999999)", "9999999999800000000001"),
    ]
)
def test_arithmetic(interp, source, expected):
    assert interp.eval_to_string(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 2)", "Expected 2 args; found values 2"),
        ("(+)", "Expected 2 args; found values "),
        ('(+ 2 "two")', 'Invalid type: expected number, found "two"'),
        ("(+ 2 '(1 2))", "Invalid type: expected number, found (1 2)"),
        ("(* 'a 'b)", "Invalid type: expected number, found a"),
        ("(- 1 #t)", "Invalid type: expected number, found #t"),
        ("(/ 1 0)", "Division by zero"),
        ("(remainder 5 0)", "Division by zero"),
        ("(/ 10 0 \"x\")", 'Invalid type: expected number, found "x"'),
    ]
)
def test_arithmetic_errors(interp, source, expected):
    assert interp.eval_to_string(source) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (Integer(5), Ok(5)),
        (Text("123"), Ok(123)),
        (List([Integer(5)]), Ok(5)),
        (List([Text("9")]), Ok(9)),
        (Text("12a"), Err(TypeMismatch("number", Text("12a")))),
        (Text(""), Err(TypeMismatch("number", Text("")))),
        (Text("-1"), Err(TypeMismatch("number", Text("-1")))),
        (Boolean(True), Err(TypeMismatch("number", Boolean(True)))),
        (Atom("x"), Err(TypeMismatch("number", Atom("x")))),
        (List([]), Err(TypeMismatch("number", List([])))),
    ]
)
def test_unpack_number(value, expected):
    assert unpack_number(value) == expected


def test_single_element_list_reports_the_inner_value():
    assert unpack_number(List([Atom("x")])) == Err(TypeMismatch("number", Atom("x")))


def test_first_bad_argument_wins():
    add = PRIMITIVES["+"]
    assert add([Integer(1), Text("a"), Atom("b")]) == Err(TypeMismatch("number", Text("a")))


def test_arity_error_carries_arguments():
    assert PRIMITIVES["*"]([Integer(2)]) == Err(WrongArgumentCount(2, [Integer(2)]))
    assert PRIMITIVES["*"]([]) == Err(WrongArgumentCount(2, []))


def test_custom_binop():
    maximum = numeric_binop(max)
    assert maximum([Integer(3), Integer(9), Integer(4)]) == Ok(Integer(9))


def test_divide_by_zero_is_an_error_value():
    assert PRIMITIVES["/"]([Integer(1), Integer(0)]) == Err(Generic("Division by zero"))


@pytest.mark.parametrize(
    "x,y,q,r",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (6, 3, 2, 0),
    ]
)
def test_division_truncates_toward_zero(x, y, q, r):
    assert quotient(x, y) == q
    assert remainder(x, y) == r


def test_primitive_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMITIVES["max"] = numeric_binop(max)
    assert sorted(PRIMITIVES) == ["*", "+", "-", "/", "remainder"]


def test_long_digit_strings_coerce():
    assert unpack_number(Text("1" * 5000)) == Ok((10 ** 5000 - 1) // 9)


def test_long_operands(interp):
    nines = "9" * 2500
    expected = "9" * 2499 + "8" + "0" * 2499 + "1"
    assert interp.eval_to_string(f"(* {nines} {nines})") == expected
    assert interp.eval_to_string(f'(+ 1 "{"9" * 5000}")') == "1" + "0" * 5000
