"""Decimal conversion for integers of any length.

CPython caps ``int(str)`` and ``str(int)`` at a configurable number of digits
(4300 by default, never below 640). Integer literals and arithmetic results
are unbounded, so conversions are split into chunks that stay under the cap.
"""

from __future__ import annotations

_CHUNK = 600
_SMALL = 10 ** _CHUNK


def parse_decimal(digits: str) -> int:
    """Convert a run of ASCII decimal digits to an int."""
    if len(digits) <= _CHUNK:
        return int(digits)
    low_width = len(digits) // 2
    high = parse_decimal(digits[:-low_width])
    return high * 10 ** low_width + parse_decimal(digits[-low_width:])


def format_decimal(number: int) -> str:
    if number < 0:
        return "-" + _unsigned(-number, 0)
    return _unsigned(number, 0)


def _unsigned(number: int, width: int) -> str:
    # width > 0 means a low half: keep its leading zeros
    if number < _SMALL:
        return str(number).zfill(width)
    # roughly half the decimal digits (log10(2) ~ 0.3)
    split = number.bit_length() * 3 // 20
    high, low = divmod(number, 10 ** split)
    return _unsigned(high, max(width - split, 0)) + _unsigned(low, split)
