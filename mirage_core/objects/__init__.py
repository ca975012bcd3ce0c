from .shapes import Bitmap, Line, Point, PointLike, Rect, Text
from .transform import Scale, Translate

__all__ = [
    "Bitmap",
    "Line",
    "Point",
    "PointLike",
    "Rect",
    "Scale",
    "Text",
    "Translate",
]
