"""ASCII character classification in the C locale.

Each function takes either a character code or a one-character string.
"""

from __future__ import annotations

_SPACES = frozenset(map(ord, " \f\n\r\t\v"))


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character code or string, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """Return whether c is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """Return whether c is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return whether c is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return whether c is in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_blank(c: int | str) -> bool:
    """Return whether c is a space or a tab."""
    return _code(c) in (ord(" "), ord("\t"))


def is_print(c: int | str) -> bool:
    """Return whether c is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_punct(c: int | str) -> bool:
    """Return whether c is printable ASCII that is neither a space nor alphanumeric."""
    code = _code(c)
    return 33 <= code <= 47 or 58 <= code <= 64 or 91 <= code <= 96 or 123 <= code <= 126


def is_space(c: int | str) -> bool:
    """Return whether c is space, form feed, newline, carriage return, tab or vertical tab."""
    return _code(c) in _SPACES