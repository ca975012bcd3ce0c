from .svg import surface_from_document, surface_from_file, surface_from_markup
from .svg_elements import (
    SvgDocument,
    SvgLine,
    SvgPolyline,
    SvgRect,
    SvgShape,
    SvgText,
    parse_file,
    parse_markup,
)

__all__ = [
    "SvgDocument",
    "SvgLine",
    "SvgPolyline",
    "SvgRect",
    "SvgShape",
    "SvgText",
    "parse_file",
    "parse_markup",
    "surface_from_document",
    "surface_from_file",
    "surface_from_markup",
]
