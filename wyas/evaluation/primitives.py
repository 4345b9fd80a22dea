from __future__ import annotations

import operator
import re
from functools import reduce
from types import MappingProxyType
from typing import Callable, Mapping

from wyas.errors import Generic, TypeMismatch, WrongArgumentCount
from wyas.types.result import Result, Ok, Err, sequence
from wyas.types.numerals import parse_decimal
from wyas.types.values import LispValue, List, Integer, Text

PrimitiveFn = Callable[[list[LispValue]], Result[LispValue]]

_DIGITS = re.compile(r"[0-9]+")


# -------------------------------
# Coercion
# -------------------------------
def unpack_number(value: LispValue) -> Result[int]:
    match value:
        case Integer(number):
            return Ok(number)
        case Text(contents) if _DIGITS.fullmatch(contents):
            return Ok(parse_decimal(contents))
        case List((inner,)):
            return unpack_number(inner)
    return Err(TypeMismatch("number", value))


# -------------------------------
# Integer division (truncates toward zero)
# -------------------------------
def quotient(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def remainder(x: int, y: int) -> int:
    return x - y * quotient(x, y)


# -------------------------------
# Folds
# -------------------------------
def numeric_binop(op: Callable[[int, int], int], checks_divisor: bool = False) -> PrimitiveFn:
    """Build a primitive folding ``op`` left to right over two or more numbers.

    ``(- 15 5 3 2)`` is ``((15 - 5) - 3) - 2``. Coercion stops at the first
    argument that is not a number; with ``checks_divisor`` a zero right-hand
    operand yields ``Generic("Division by zero")``.
    """

    def step(acc: Result[int], n: int) -> Result[int]:
        if checks_divisor and n == 0:
            return acc.bind(lambda _: Err(Generic("Division by zero")))
        return acc.map(lambda x: op(x, n))

    def primitive(args: list[LispValue]) -> Result[LispValue]:
        if len(args) < 2:
            return Err(WrongArgumentCount(2, args))
        unpacked = sequence(unpack_number(arg) for arg in args)
        return unpacked.bind(
            lambda numbers: reduce(step, numbers[1:], Ok(numbers[0]))
        ).map(Integer)

    return primitive


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: Mapping[str, PrimitiveFn] = MappingProxyType({
    "+": numeric_binop(operator.add),
    "-": numeric_binop(operator.sub),
    "*": numeric_binop(operator.mul),
    "/": numeric_binop(quotient, checks_divisor=True),
    "remainder": numeric_binop(remainder, checks_divisor=True),
})

SIGNATURES: Mapping[str, str] = MappingProxyType({
    "+": "(+ n1 n2 ...)",
    "-": "(- n1 n2 ...)",
    "*": "(* n1 n2 ...)",
    "/": "(/ n1 n2 ...)",
    "remainder": "(remainder n1 n2 ...)",
})
