"""The queue of draw calls, each naming an image and one of its instances."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pixelframe.image import Image


@dataclass(eq=False)
class DrawCall:
    """A request to draw one instance of an image."""

    image: Image
    instance_id: int

    def z(self) -> int:
        """Return the depth of the instance this call draws."""
        return self.image.instances[self.instance_id].z


class RenderQueue:
    """Ordered draw calls; new calls go to the front."""

    def __init__(self) -> None:
        self._calls: list[DrawCall] = []

    def add_front(self, call: DrawCall) -> None:
        """Put a draw call at the front of the queue."""
        self._calls.insert(0, call)

    def remove_image(self, image: Image) -> list[DrawCall]:
        """Remove every draw call for the given image and return them."""
        removed = [call for call in self._calls if call.image is image]
        self._calls = [call for call in self._calls if call.image is not image]
        return removed

    def sort(self) -> None:
        """Order calls by ascending depth.

        Among calls of equal depth the later one in the queue comes first.
        """
        self._calls = sorted(reversed(self._calls), key=DrawCall.z)

    def __iter__(self) -> Iterator[DrawCall]:
        return iter(list(self._calls))

    def __len__(self) -> int:
        return len(self._calls)