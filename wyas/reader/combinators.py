"""
  Parser combinators

A Parser wraps a function ``(source, offset) -> Result`` where a success is
``Ok((value, next_offset))`` and a failure is ``Err(ParseFailure(...))``.
The same Result type used by the evaluator carries reader failures, so a
reader error can be handed straight to the caller.

Whitespace is never skipped implicitly: grammars consume it with explicit
rules. The kernel covers the token-level rules; ``wyas.reader.parser``
writes its recursive rules as plain functions over the same Result shape.

Ordered choice (``a | b``) tries alternatives left to right and surfaces the
failure of the last alternative tried when none match.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from wyas.errors import ParseFailure
from wyas.types.result import Result, Ok, Err

ParseFn = Callable[[str, int], Result]


def _found(source: str, offset: int) -> str:
    if offset >= len(source):
        return "end of source"
    return f"'{source[offset]}'"


def _fail(expected: str, source: str, offset: int) -> Err:
    return Err(ParseFailure(f"{expected} expected but {_found(source, offset)} found", offset))


class Parser:
    def __init__(self, fn: ParseFn):
        self.fn = fn

    def __call__(self, source: str, offset: int = 0) -> Result:
        return self.fn(source, offset)

    def map(self, transform: Callable[[Any], Any]) -> Parser:
        def parse(source: str, offset: int) -> Result:
            return self(source, offset).map(lambda hit: (transform(hit[0]), hit[1]))
        return Parser(parse)

    def then(self, other: Parser) -> Parser:
        """Sequence two parsers, keeping both values as a pair."""
        def parse(source: str, offset: int) -> Result:
            return self(source, offset).bind(
                lambda first: other(source, first[1]).map(
                    lambda second: ((first[0], second[0]), second[1])
                )
            )
        return Parser(parse)

    def skip_left(self, other: Parser) -> Parser:
        """Run both, keep the value of ``other``."""
        return self.then(other).map(lambda pair: pair[1])

    def skip_right(self, other: Parser) -> Parser:
        """Run both, keep the value of ``self``."""
        return self.then(other).map(lambda pair: pair[0])

    def __or__(self, other: Parser) -> Parser:
        def parse(source: str, offset: int) -> Result:
            result = self(source, offset)
            if result.is_ok():
                return result
            return other(source, offset)
        return Parser(parse)


# -------------------------------
# Primitive parsers
# -------------------------------

def literal(text: str) -> Parser:
    def parse(source: str, offset: int) -> Result:
        if source.startswith(text, offset):
            return Ok((text, offset + len(text)))
        return _fail(f"'{text}'", source, offset)
    return Parser(parse)


def regex(pattern: str) -> Parser:
    compiled = re.compile(pattern)

    def parse(source: str, offset: int) -> Result:
        match = compiled.match(source, offset)
        if match:
            return Ok((match.group(0), match.end()))
        return _fail(f"string matching regex '{pattern}'", source, offset)
    return Parser(parse)


def end_of_input() -> Parser:
    def parse(source: str, offset: int) -> Result:
        if offset >= len(source):
            return Ok((None, offset))
        return _fail("end of source", source, offset)
    return Parser(parse)
