from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .raster.pixels import Pixel, PixelType


DEFAULT_FONT_SIZE = 12
BACKGROUND = 0xFF


@dataclass(frozen=True)
class RasterConfig:
    """Fill and stroke bytes handed to an Image at construction."""

    background: int = BACKGROUND
    rgb_stroke: tuple[int, ...] = (0, 0, 0)
    rgba_stroke: tuple[int, ...] = (0, 0, 0, 255)

    def __post_init__(self) -> None:
        _require_byte(self.background, "background")
        _coerce_color(list(self.rgb_stroke), 3, "rgb_stroke")
        _coerce_color(list(self.rgba_stroke), 4, "rgba_stroke")

    def stroke_for(self, pixel: "PixelType") -> "Pixel":
        for stroke in (self.rgb_stroke, self.rgba_stroke):
            if pixel.matches(stroke):
                return stroke
        raise ValueError(f"no stroke colour configured for {pixel!r}")


def load_raster_config(path: str | Path) -> RasterConfig:
    """Read a `[raster]` table from a TOML file; absent keys keep their defaults."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"raster config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("raster", {})
    if not isinstance(table, dict):
        raise ValueError("raster must be a table")
    kwargs: dict[str, Any] = {}
    if "background" in table:
        kwargs["background"] = _require_byte(table["background"], "raster.background")
    if "rgb_stroke" in table:
        kwargs["rgb_stroke"] = _coerce_color(table["rgb_stroke"], 3, "raster.rgb_stroke")
    if "rgba_stroke" in table:
        kwargs["rgba_stroke"] = _coerce_color(table["rgba_stroke"], 4, "raster.rgba_stroke")
    return RasterConfig(**kwargs)


def _require_byte(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer")
    if value < 0 or value > 255:
        raise ValueError(f"{label} out of range: {value}")
    return value


def _coerce_color(value: Any, channels: int, label: str) -> tuple[int, ...]:
    if not isinstance(value, list) or len(value) != channels:
        raise ValueError(f"{label} must be a list of {channels} integers")
    return tuple(_require_byte(v, label) for v in value)


DEFAULT_RASTER_CONFIG = RasterConfig()
