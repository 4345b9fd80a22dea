"""Value model for Wyas s-expressions.

Every value the reader produces, and every value the evaluator returns, is
one of six immutable variants:

    - Atom        -> a symbolic name, e.g. ``foo`` or ``+``
    - List        -> a proper list, possibly empty
    - DottedPair  -> an improper list ``(a b . c)``
    - Integer     -> an unsigned literal or an arithmetic result
    - Text        -> a double-quoted string literal
    - Boolean     -> ``#t`` / ``#f``

Sequence payloads are stored as tuples so values can be shared freely.
Variants never compare equal across tags (``Integer(1) != Boolean(True)``).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


class LispValue:
    """Base class for all Wyas values."""

    __slots__ = ()

    def __str__(self) -> str:
        # Lazy import: the printer depends on this module.
        from wyas.printer import render
        return render(self)


@dataclass(frozen=True)
class Atom(LispValue):
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(self.name))


@dataclass(frozen=True)
class List(LispValue):
    items: tuple[LispValue, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class DottedPair(LispValue):
    head: tuple[LispValue, ...]
    tail: LispValue

    def __post_init__(self):
        head = tuple(self.head)
        if not head:
            raise ValueError("DottedPair requires at least one leading element")
        object.__setattr__(self, "head", head)


@dataclass(frozen=True)
class Integer(LispValue):
    value: int


@dataclass(frozen=True)
class Text(LispValue):
    contents: str


@dataclass(frozen=True)
class Boolean(LispValue):
    value: bool


TRUE = Boolean(True)
FALSE = Boolean(False)
EMPTY = List()
