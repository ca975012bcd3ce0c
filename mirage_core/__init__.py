"""Mirage: a small vector-graphics description library.

Shapes are described as integer geometry, ingested from SVG-like markup and
rasterized into a validated pixel buffer. Rendering beyond that is left to
external consumers.
"""

from .config import DEFAULT_FONT_SIZE, DEFAULT_RASTER_CONFIG, RasterConfig, load_raster_config
from .context import Context
from .convert import parse_markup, surface_from_file, surface_from_markup
from .errors import BoundsError, MirageError, ParseError, PixelFormatError, UnsupportedOperationError
from .objects import Bitmap, Line, Point, Rect, Scale, Text, Translate
from .raster import Image, PixelType, RasterReport, coverage, save_image
from .surface import Group, Meta, Object, Primitive, Surface

__all__ = [
    "Bitmap",
    "BoundsError",
    "Context",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_RASTER_CONFIG",
    "Group",
    "Image",
    "Line",
    "Meta",
    "MirageError",
    "Object",
    "ParseError",
    "PixelFormatError",
    "PixelType",
    "Point",
    "Primitive",
    "RasterConfig",
    "RasterReport",
    "Rect",
    "Scale",
    "Surface",
    "Text",
    "Translate",
    "UnsupportedOperationError",
    "coverage",
    "load_raster_config",
    "parse_markup",
    "save_image",
    "surface_from_file",
    "surface_from_markup",
]
