"""
  Wyas Reader

Turns a source string into exactly one value:

    - atoms        -> Atom       (``#t`` / ``#f`` lexemes -> Boolean)
    - digits       -> Integer    (unsigned only)
    - "..."        -> Text       (no escapes)
    - 'expr        -> List[Atom("quote"), expr]
    - (a b c)      -> List
    - (a b . c)    -> DottedPair

Grammar (ordered choice, first match wins):

    expr       := atom | number | string | quoted | list
    atom       := (letter | symbolChar) (letter | digit | symbolChar)*
    number     := digit+
    string     := '"' nonQuoteChar* '"'
    quoted     := "'" expr
    list       := "(" (dottedList | properList) ")"
    dottedList := (expr sep)+ "." sep expr
    properList := expr (sep expr)* | <empty>
    sep        := " "+

Whitespace is only accepted where ``sep`` appears; the whole input must be
consumed by a single expression.
"""

from __future__ import annotations

import re

from wyas.reader.combinators import (
    Parser,
    end_of_input,
    literal,
    regex,
)
from wyas.errors import ParseFailure
from wyas.types.numerals import parse_decimal
from wyas.types.result import Result, Err
from wyas.types.values import (
    LispValue,
    Atom,
    List,
    DottedPair,
    Integer,
    Text,
    FALSE,
    TRUE,
)

SYMBOL_CHARS = "!#$%&|*-+/:<=>?@^_~"

_SYMBOL_CLASS = "[" + re.escape(SYMBOL_CHARS) + "]"
ATOM_PATTERN = rf"(?:[a-zA-Z]|{_SYMBOL_CLASS})(?:[a-zA-Z0-9]|{_SYMBOL_CLASS})*"

QUOTE = Atom("quote")


def _atom_or_boolean(lexeme: str) -> LispValue:
    # Matched greedily first, so "#true" stays an atom.
    if lexeme == "#t":
        return TRUE
    if lexeme == "#f":
        return FALSE
    return Atom(lexeme)


_space = regex(" +")
_open = literal("(")
_close = literal(")")
_dot = literal(".")

atom = regex(ATOM_PATTERN).map(_atom_or_boolean)
number = regex("[0-9]+").map(lambda digits: Integer(parse_decimal(digits)))
text = literal('"').skip_left(regex('[^"]*')).skip_right(literal('"')).map(Text)

# The leaf alternatives start with disjoint characters, so at most one of
# them can match at a given offset.
_token = atom | number | text


# The recursive rules are plain functions calling each other directly: every
# nesting level costs two Python frames.

def _expr(source: str, offset: int) -> Result:
    lead = source[offset:offset + 1]
    if lead == "'":
        result = _quoted(source, offset)
        if result.is_ok():
            return result
    elif lead != "(":
        result = _token(source, offset)
        if result.is_ok():
            return result
    # the list rule is the last alternative; its failure is the one reported
    return _list(source, offset)


def _quoted(source: str, offset: int) -> Result:
    return _expr(source, offset + 1).map(lambda hit: (List((QUOTE, hit[0])), hit[1]))


def _list(source: str, offset: int) -> Result:
    opened = _open(source, offset)
    if opened.is_err():
        return opened
    items: list[LispValue] = []
    position = end = opened.value[1]
    separated = False
    while True:
        element = _expr(source, position)
        if element.is_err():
            break
        value, end = element.value
        items.append(value)
        gap = _space(source, end)
        separated = gap.is_ok()
        if not separated:
            break
        position = gap.value[1]

    if items and separated:
        # every element so far was followed by a separator: try ". tail"
        dotted = _dotted_tail(source, position)
        if dotted.is_ok():
            tail, end = dotted.value
            return _close(source, end).map(lambda hit: (DottedPair(items, tail), hit[1]))
    return _close(source, end).map(lambda hit: (List(items), hit[1]))


def _dotted_tail(source: str, offset: int) -> Result:
    dot = _dot(source, offset)
    if dot.is_err():
        return dot
    gap = _space(source, dot.value[1])
    if gap.is_err():
        return gap
    return _expr(source, gap.value[1])


expr = Parser(_expr)
program = expr.skip_right(end_of_input())


def parse(source: str) -> Result[LispValue]:
    """Read ``source`` into a single value, or an Err(ParseFailure).

    Never raises: input nested past the interpreter's recursion limit is
    reported as a ParseFailure.
    """
    try:
        return program(source, 0).map(lambda hit: hit[0])
    except RecursionError:
        return Err(ParseFailure("expression nested too deeply", 0))
