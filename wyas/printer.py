from __future__ import annotations

from typing import Iterable

from wyas.types.numerals import format_decimal
from wyas.types.values import LispValue, Atom, List, DottedPair, Integer, Text, Boolean


def render(value: LispValue) -> str:
    """Return the canonical source text for ``value``.

    Re-reading the output yields a structurally equal value.
    """
    match value:
        case Text(contents):
            return f'"{contents}"'
        case Atom(name):
            return name
        case Integer(number):
            return format_decimal(number)
        case Boolean(flag):
            return "#t" if flag else "#f"
        case List(items):
            return f"({render_all(items)})"
        case DottedPair(head, tail):
            return f"({render_all(head)} . {render(tail)})"
    raise TypeError(f"Cannot render non-Wyas value: {value!r}")


def render_all(values: Iterable[LispValue]) -> str:
    return " ".join([render(v) for v in values])
