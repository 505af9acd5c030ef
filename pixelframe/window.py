"""Window state, its hooks, and the screen projection matrix."""

from __future__ import annotations

import math
import struct
from collections.abc import Callable

from pixelframe.image import Texture

DONT_CARE = -1


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _fdiv(numerator: float, denominator: float) -> float:
    """Divide as single-precision IEEE floats do, including by zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return _f32(numerator / denominator)


def projection_matrix(width: float, height: float, depth: float) -> tuple[float, ...]:
    """Return the column-major orthographic matrix mapping pixels to clip space."""
    w = _f32(float(width))
    h = _f32(float(height))
    d = _f32(float(depth))
    span = _f32(d - -d)
    return (
        _fdiv(2.0, w), 0.0, 0.0, 0.0,
        0.0, _fdiv(2.0, -h), 0.0, 0.0,
        0.0, 0.0, _fdiv(-2.0, span), 0.0,
        -1.0, -_fdiv(h, -h), -_fdiv(_f32(d + -d), span), 1.0,
    )


def _check_callable(func: object) -> None:
    if not callable(func):
        raise TypeError("hook must be callable")


class Window:
    """A window's size, position, title, limits and event hooks."""

    def __init__(self, width: int, height: int, title: str, resizable: bool = False) -> None:
        if width <= 0:
            raise ValueError("window width must be positive")
        if height <= 0:
            raise ValueError("window height must be positive")
        if not isinstance(title, str):
            raise TypeError("window title must be a string")
        self.width = width
        self.height = height
        self.title = title
        self.resizable = resizable
        self.x = 0
        self.y = 0
        self.limits = (DONT_CARE, DONT_CARE, DONT_CARE, DONT_CARE)
        self.icon: Texture | None = None
        self.should_close = False
        self._close_hook: Callable[[], None] | None = None
        self._resize_hook: Callable[[int, int], None] | None = None

    def _clamp(self, width: int, height: int) -> tuple[int, int]:
        min_w, min_h, max_w, max_h = self.limits
        if min_w != DONT_CARE:
            width = max(width, min_w)
        if max_w != DONT_CARE:
            width = min(width, max_w)
        if min_h != DONT_CARE:
            height = max(height, min_h)
        if max_h != DONT_CARE:
            height = min(height, max_h)
        return width, height

    def _apply_size(self, width: int, height: int) -> None:
        width, height = self._clamp(width, height)
        if (width, height) == (self.width, self.height):
            return
        self.width = width
        self.height = height
        if self._resize_hook is not None:
            self._resize_hook(width, height)

    def set_size(self, width: int, height: int) -> None:
        """Change the window size, keeping it within the size limits."""
        self._apply_size(width, height)

    def set_limit(self, min_width: int, min_height: int, max_width: int, max_height: int) -> None:
        """Bound the window size; pass DONT_CARE (-1) to leave a bound open."""
        values = (min_width, min_height, max_width, max_height)
        if any(value < DONT_CARE for value in values):
            raise ValueError("size limits must be non-negative or DONT_CARE")
        for low, high in ((min_width, max_width), (min_height, max_height)):
            if DONT_CARE not in (low, high) and high < low:
                raise ValueError("maximum size limit is below the minimum")
        self.limits = values
        self._apply_size(self.width, self.height)

    def set_pos(self, x: int, y: int) -> None:
        """Move the window."""
        self.x = x
        self.y = y

    def get_pos(self) -> tuple[int, int]:
        """Return the window position as (x, y)."""
        return self.x, self.y

    def set_title(self, title: str) -> None:
        """Change the window title."""
        if not isinstance(title, str):
            raise TypeError("window title must be a string")
        self.title = title

    def set_icon(self, texture: Texture) -> None:
        """Use a texture as the window icon."""
        if texture is None:
            raise TypeError("icon texture can't be None")
        self.icon = texture

    def close_hook(self, func: Callable[[], None]) -> None:
        """Call func when the user asks to close the window."""
        _check_callable(func)
        self._close_hook = func

    def resize_hook(self, func: Callable[[int, int], None]) -> None:
        """Call func(width, height) whenever the window size changes."""
        _check_callable(func)
        self._resize_hook = func

    def request_close(self) -> bool:
        """Mark the window to close, run the close hook, and return whether it will close.

        The hook may cancel the request by setting ``should_close`` back to False.
        """
        self.should_close = True
        if self._close_hook is not None:
            self._close_hook()
        return self.should_close

    def notify_resize(self, width: int, height: int) -> None:
        """Report a size change coming from the user or the platform."""
        self._apply_size(width, height)