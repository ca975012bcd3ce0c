from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_FONT_SIZE
from ..objects import Line, Point, Rect, Text
from ..surface import Meta, Object, Surface
from .svg_elements import (
    SvgDocument,
    SvgLine,
    SvgPolyline,
    SvgRect,
    SvgText,
    parse_file,
    parse_markup,
)


LOGGER = logging.getLogger(__name__)


def surface_from_markup(svg_markup: str) -> Surface:
    return surface_from_document(parse_markup(svg_markup))


def surface_from_file(path: str | Path) -> Surface:
    return surface_from_document(parse_file(path))


def surface_from_document(doc: SvgDocument) -> Surface:
    objects: list[Object] = []
    dropped = 0
    for shape in doc.shapes:
        if isinstance(shape, SvgLine):
            obj: Optional[Object] = _line(shape)
        elif isinstance(shape, SvgRect):
            obj = _rect(shape)
        elif isinstance(shape, SvgText):
            obj = _text(shape)
        elif isinstance(shape, SvgPolyline):
            obj = _polyline(shape)
        else:
            raise TypeError(f"Unsupported svg shape: {type(shape)!r}")
        if obj is None:
            dropped += 1
            continue
        objects.append(obj)
    if dropped:
        LOGGER.debug("dropped %d degenerate svg shapes", dropped)
    return Surface(objects, meta=Meta(position=Point(doc.x, doc.y)))


def _line(line: SvgLine) -> Optional[Object]:
    if line.x1 == line.x2 and line.y1 == line.y2:
        return None
    if abs(line.x1 - line.x2) == 1 and abs(line.y1 - line.y2) == 1:
        return Point(line.x1, line.y1)
    return Line.from_points([(line.x1, line.y1), (line.x2, line.y2)])


def _rect(rect: SvgRect) -> Rect:
    x = rect.x if rect.x is not None else 0
    y = rect.y if rect.y is not None else 0
    return Rect(Point(x, y), rect.width, rect.height)


def _text(text: SvgText) -> Text:
    size = text.font_size if text.font_size is not None else DEFAULT_FONT_SIZE
    return Text(Point(text.x, text.y), text.text, size)


def _polyline(polyline: SvgPolyline) -> Optional[Object]:
    if not polyline.points:
        return None
    if len(polyline.points) == 1:
        return Point.of(polyline.points[0])
    return Line.from_points(polyline.points)
