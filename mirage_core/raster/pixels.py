from __future__ import annotations

from enum import Enum
from typing import Sequence, TypeAlias

from ..errors import PixelFormatError


Pixel: TypeAlias = tuple[int, ...]


class PixelType(Enum):
    """Channel layout enforced by an image buffer."""

    RGB = "rgb"
    RGBA = "rgba"

    @property
    def channels(self) -> int:
        if self is PixelType.RGB:
            return 3
        return 4

    @property
    def mode(self) -> str:
        """Pillow image mode for this layout."""
        return self.name

    def matches(self, pixel: Sequence[int]) -> bool:
        return len(pixel) == self.channels

    def validate(self, pixel: Sequence[int]) -> Pixel:
        if not self.matches(pixel):
            raise PixelFormatError(
                f"pixel {tuple(pixel)!r} has {len(pixel)} channels, {self.name} expects {self.channels}"
            )
        for channel in pixel:
            if isinstance(channel, bool) or not isinstance(channel, int) or channel < 0 or channel > 255:
                raise PixelFormatError(f"pixel {tuple(pixel)!r} has a channel outside 0..255")
        return tuple(pixel)
