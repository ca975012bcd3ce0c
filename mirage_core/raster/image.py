from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from ..config import DEFAULT_RASTER_CONFIG, RasterConfig
from ..errors import BoundsError
from ..surface import Surface
from .coverage import Coord, coverage
from .export import save_image
from .pixels import Pixel, PixelType


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RasterReport:
    written: int
    out_of_bounds: int


@dataclass
class Image:
    """Row-major pixel buffer, origin top-left, validated on every write."""

    name: str
    width: int
    height: int
    pixel: PixelType = PixelType.RGB
    config: RasterConfig = field(default=DEFAULT_RASTER_CONFIG, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        size = self.pixel.channels * self.width * self.height
        self.buffer = np.full(size, self.config.background, dtype=np.uint8)

    @property
    def channels(self) -> int:
        return self.pixel.channels

    def index(self, pos: Coord) -> int:
        x, y = pos
        return self.channels * (x + y * self.width)

    def in_bounds(self, pos: Coord) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, pixel: Sequence[int], pos: Coord) -> None:
        self.write_pixels([pixel], pos)

    def write_pixels(self, pixels: Sequence[Sequence[int]], pos: Coord) -> None:
        """Write a run of pixels starting at `pos`, continuing along the row.

        Every pixel is checked against the buffer's format before any byte
        changes; a rejected call leaves the buffer as it was.
        """
        staged = [self.pixel.validate(p) for p in pixels]
        if not self.in_bounds(pos):
            raise BoundsError(f"pixel position out of bounds: {pos} for {self.width}x{self.height}")
        start = self.index(pos)
        end = start + len(staged) * self.channels
        if end > self.buffer.size:
            raise BoundsError(f"pixel run of {len(staged)} from {pos} overflows the image")
        if staged:
            self.buffer[start:end] = np.asarray(staged, dtype=np.uint8).reshape(-1)

    def read_pixel(self, pos: Coord) -> Pixel:
        if not self.in_bounds(pos):
            raise BoundsError(f"pixel position out of bounds: {pos} for {self.width}x{self.height}")
        start = self.index(pos)
        return tuple(int(v) for v in self.buffer[start : start + self.channels])

    def write(self, surface: Surface) -> RasterReport:
        """Stroke every top-level primitive of `surface` in order."""
        runs = [coverage(p) for p in surface.primitives()]
        stroke = self.config.stroke_for(self.pixel)
        written = 0
        out_of_bounds = 0
        for coords in runs:
            for pos in coords:
                try:
                    self.write_pixel(stroke, pos)
                except BoundsError:
                    out_of_bounds += 1
                    continue
                written += 1
        if out_of_bounds > 0:
            LOGGER.warning(
                "Image %s skipped out-of-bounds pixels; out_of_bounds=%d written=%d",
                self.name,
                out_of_bounds,
                written,
            )
        return RasterReport(written=written, out_of_bounds=out_of_bounds)

    def clear(self) -> None:
        self.buffer.fill(self.config.background)

    def to_bytes(self) -> bytes:
        return self.buffer.tobytes()

    def as_array(self) -> np.ndarray:
        """(height, width, channels) view sharing memory with the buffer."""
        return self.buffer.reshape(self.height, self.width, self.channels)

    def save(self, path: str | Path | None = None) -> Path:
        return save_image(self, path if path is not None else self.name)
