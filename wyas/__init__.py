# Core entry points for the Wyas expression language.
#
#   text -> parse -> value -> evaluate -> Result -> render / render_error -> text
#
# Values and errors are immutable dataclasses (wyas.types.values, wyas.errors);
# every fallible step returns a Result (wyas.types.result) instead of raising.

from wyas.types.values import LispValue, Atom, List, DottedPair, Integer, Text, Boolean
from wyas.types.result import Result, Ok, Err
from wyas.errors import (
    LispError,
    WrongArgumentCount,
    TypeMismatch,
    ParseFailure,
    UnrecognizedForm,
    UnknownProcedure,
    UnboundName,
    Generic,
    render_error,
)
from wyas.printer import render
from wyas.reader.parser import parse
from wyas.evaluation.evaluator import evaluate
from wyas.evaluation.primitives import PRIMITIVES, PrimitiveFn

# Runtime value alias
Value = LispValue

__all__ = [
    "Value", "LispValue", "Atom", "List", "DottedPair", "Integer", "Text", "Boolean",
    "Result", "Ok", "Err",
    "LispError", "WrongArgumentCount", "TypeMismatch", "ParseFailure", "UnrecognizedForm",
    "UnknownProcedure", "UnboundName", "Generic",
    "parse", "evaluate", "render", "render_error", "PRIMITIVES", "PrimitiveFn",
]
