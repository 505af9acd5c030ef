"""Lenient integer parsing and formatting with C integer widths."""

from __future__ import annotations

import re
from itertools import zip_longest

INT_BITS = 32
LONG_BITS = 64
LONG_LONG_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1
LONG_LONG_MAX_TEXT = "9223372036854775807"

_LEADING = re.compile(r"[ \t\n\x0b\x0c\r]*([+-]?)([0-9]*)")
_UNPADDED_DIGITS = re.compile(r"0*([0-9]*)")


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement signed integer of the given width."""
    modulus = 1 << bits
    value &= modulus - 1
    return value - modulus if value >= modulus >> 1 else value


def _check_int(n: int) -> int:
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n!r} does not fit in a {INT_BITS}-bit int")
    return n


def _parse(text: str, bits: int) -> int:
    sign, digits = _LEADING.match(text).groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap(value, bits)


def _strncmp(left: str, right: str, count: int) -> int:
    """Compare at most count bytes; the result is the difference of the first mismatch."""
    for a, b in zip_longest(
        left.encode("utf-8")[:count], right.encode("utf-8")[:count], fillvalue=0
    ):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def int_abs(n: int) -> int:
    """Return the absolute value of a 32-bit int; the minimum value maps to itself."""
    return _wrap(abs(_check_int(n)), INT_BITS)


def atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does, wrapping to 32 bits.

    Leading whitespace and one sign are skipped; parsing stops at the first
    non-digit. Text without digits gives 0.
    """
    return _parse(text, INT_BITS)


def atol(text: str) -> int:
    """Parse a leading integer like atoi, wrapping to 64 bits."""
    return _parse(text, LONG_BITS)


def atoll(text: str) -> int:
    """Parse a leading integer like atoi, wrapping to 64 bits."""
    return _parse(text, LONG_LONG_BITS)


def fits_int(text: str) -> bool:
    """Return whether the number in text parses to the same value as a 32-bit int."""
    return atoi(text) == atol(text)


def fits_long(text: str) -> bool:
    """Return whether the 32-bit and 64-bit parses of text agree."""
    return atoi(text) == atoll(text)


def long_long_overflows(text: str) -> bool:
    """Return whether the digits at the start of text exceed the 64-bit maximum.

    Leading zeros are ignored when counting digits; a run of exactly 19 digits
    is compared character by character with the largest 64-bit value.
    """
    length = len(_UNPADDED_DIGITS.match(text).group(1))
    negative = _LEADING.match(text).group(1) == "-"
    if length > len(LONG_LONG_MAX_TEXT):
        return True
    if length < len(LONG_LONG_MAX_TEXT):
        return False
    difference = _strncmp(text, LONG_LONG_MAX_TEXT, len(LONG_LONG_MAX_TEXT))
    return difference > 1 if negative else difference > 0


def itoa(n: int) -> str:
    """Format a 32-bit int as decimal text."""
    return str(_check_int(n))