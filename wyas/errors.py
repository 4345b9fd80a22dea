from __future__ import annotations

from dataclasses import dataclass, field

from wyas.printer import render, render_all
from wyas.types.values import LispValue


# -------------------------------
# Evaluation / reader errors
# -------------------------------
# These are plain data carried inside Err results, never raised.

class LispError:
    """ Base class for all errors surfaced through a Result"""
    __slots__ = ()

    def __str__(self) -> str:
        return render_error(self)


@dataclass(frozen=True)
class WrongArgumentCount(LispError):
    """ A primitive received fewer arguments than it requires"""
    expected: int
    found: tuple[LispValue, ...]

    def __post_init__(self):
        object.__setattr__(self, "found", tuple(self.found))


@dataclass(frozen=True)
class TypeMismatch(LispError):
    """ A value could not be used where the labelled type was expected"""
    expected: str
    found: LispValue


@dataclass(frozen=True)
class ParseFailure(LispError):
    """ The reader could not match the input"""
    message: str
    offset: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class UnrecognizedForm(LispError):
    """ The evaluator met a shape it has no rule for"""
    message: str
    form: LispValue


@dataclass(frozen=True)
class UnknownProcedure(LispError):
    """ The head of a call names no primitive"""
    message: str
    name: str


@dataclass(frozen=True)
class UnboundName(LispError):
    """ A name is used before it is bound"""
    message: str
    name: str


@dataclass(frozen=True)
class Generic(LispError):
    message: str


def render_error(error: LispError) -> str:
    match error:
        case UnboundName(message, name):
            return f"{message}: {name}"
        case UnrecognizedForm(message, form):
            return f"{message}: {render(form)}"
        case UnknownProcedure(message, name):
            return f"{message}: {name}"
        case WrongArgumentCount(expected, found):
            return f"Expected {expected} args; found values {render_all(found)}"
        case TypeMismatch(expected, found):
            return f"Invalid type: expected {expected}, found {render(found)}"
        case ParseFailure(message):
            return f"Parse error at {message}"
        case Generic(message):
            return message
    raise TypeError(f"Not a Wyas error: {error!r}")


# -------------------------------
# Python-level exceptions
# -------------------------------

class WyasError(Exception):
    """ Base class for all Wyas exceptions"""
    pass


class UnwrapError(WyasError):
    """ Raised when the wrong side of a Result is unwrapped"""

    def __init__(self, message: str, payload=None):
        super().__init__(message)
        self.payload = payload


class WyasConfigError(WyasError):
    """ Raised when an environment setting cannot be interpreted"""
