"""Core evaluator for Wyas.

A plain recursive case analysis, no environment:

    - Integer, Text, Boolean          -> themselves
    - (quote x)                       -> x
    - (name arg ...)                  -> arguments left to right, then the primitive
    - anything else                   -> UnrecognizedForm

Every step returns a Result; the first failing argument is surfaced and the
remaining arguments are never evaluated. Trees nested past the recursion
limit come back as Generic("expression nested too deeply").
"""

from __future__ import annotations

from typing import Mapping

from wyas.errors import Generic, UnknownProcedure, UnrecognizedForm
from wyas.evaluation.primitives import PRIMITIVES, PrimitiveFn
from wyas.types.result import Result, Err, Ok, sequence
from wyas.types.values import LispValue, Atom, List, Integer, Text, Boolean


def evaluate(
    value: LispValue, primitives: Mapping[str, PrimitiveFn] = PRIMITIVES
) -> Result[LispValue]:
    try:
        return _evaluate(value, primitives)
    except RecursionError:
        return Err(Generic("expression nested too deeply"))


def _evaluate(value: LispValue, primitives: Mapping[str, PrimitiveFn]) -> Result[LispValue]:
    match value:
        case Integer() | Text() | Boolean():
            return Ok(value)
        case List((Atom("quote"), *rest)):
            if len(rest) == 1:
                return Ok(rest[0])
            return Err(UnrecognizedForm("Unrecognized special form", value))
        case List((Atom(name), *args)):
            # Generator keeps evaluation lazy: sequence stops at the first Err.
            evaluated = sequence(_evaluate(arg, primitives) for arg in args)
            return evaluated.bind(lambda values: apply(name, values, primitives))
    return Err(UnrecognizedForm("Unrecognized special form", value))


def apply(
    name: str, args: list[LispValue], primitives: Mapping[str, PrimitiveFn] = PRIMITIVES
) -> Result[LispValue]:
    primitive = primitives.get(name)
    if primitive is None:
        return Err(UnknownProcedure("Unrecognized primitive function args", name))
    return primitive(args)
