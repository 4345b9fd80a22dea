"""Result carrier threaded through the reader and the evaluator.

A Result is either ``Ok(value)`` or ``Err(error)``; there is no third state.
Combinators never mutate, they only build new Results:

    - map      -> transform the success value
    - map_err  -> transform the error
    - bind     -> chain a computation that itself returns a Result
    - fold     -> collapse both sides to a common type (used for rendering)

``sequence`` turns an iterable of Results into a Result of a list, stopping
at the first Err. Pass a generator to keep the remaining work unevaluated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar, Union

from wyas.errors import LispError, UnwrapError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[LispError], LispError]) -> Result[T]:
        return self

    def bind(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return fn(self.value)

    def fold(self, on_err: Callable[[LispError], U], on_ok: Callable[[T], U]) -> U:
        return on_ok(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> LispError:
        raise UnwrapError(f"Called unwrap_err on {self!r}", self.value)


@dataclass(frozen=True)
class Err:
    error: LispError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn) -> Err:
        return self

    def map_err(self, fn: Callable[[LispError], LispError]) -> Err:
        return Err(fn(self.error))

    def bind(self, fn) -> Err:
        return self

    def fold(self, on_err: Callable[[LispError], U], on_ok) -> U:
        return on_err(self.error)

    def unwrap(self):
        raise UnwrapError(f"Called unwrap on Err: {self.error}", self.error)

    def unwrap_err(self) -> LispError:
        return self.error


Result = Union[Ok[T], Err]


def sequence(results: Iterable[Result[T]]) -> Result[list[T]]:
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
