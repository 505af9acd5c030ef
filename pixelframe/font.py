"""Layout of the built-in font atlas."""

from __future__ import annotations

FONT_WIDTH = 10
FONT_HEIGHT = 20
MAX_STRING = 512

# Each glyph in the atlas is followed by a 2-pixel separator line.
_GLYPH_STRIDE = FONT_WIDTH + 2
_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 126


def texture_offset(char: str) -> int:
    """Return the X offset of a character in the font atlas, or -1 if it has no glyph."""
    if not isinstance(char, str):
        raise TypeError(f"expected a one-character string, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {len(char)}")
    code = ord(char)
    if not _FIRST_PRINTABLE <= code <= _LAST_PRINTABLE:
        return -1
    return _GLYPH_STRIDE * (code - _FIRST_PRINTABLE)