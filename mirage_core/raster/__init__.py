from .coverage import coverage, segment
from .export import save_image, to_pil
from .image import Image, RasterReport
from .pixels import Pixel, PixelType

__all__ = [
    "Image",
    "Pixel",
    "PixelType",
    "RasterReport",
    "coverage",
    "save_image",
    "segment",
    "to_pil",
]
