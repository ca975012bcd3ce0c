from __future__ import annotations

import math

import numpy as np

from ..errors import UnsupportedOperationError
from ..objects import Line, Point, Rect, Text
from ..surface import Primitive


Coord = tuple[int, int]


def coverage(primitive: Primitive) -> list[Coord]:
    """Pixel coordinates covered by one primitive, in drawing order."""
    if isinstance(primitive, Point):
        return [_coord(primitive)]
    if isinstance(primitive, Line):
        return _line(primitive)
    if isinstance(primitive, Rect):
        return _rect(primitive)
    if isinstance(primitive, Text):
        raise UnsupportedOperationError("text primitives cannot be rasterized")
    raise TypeError(f"Unsupported primitive: {type(primitive)!r}")


def segment(p1: Coord, p2: Coord) -> list[Coord]:
    """Sample one segment, stepping along x for anything neither vertical nor horizontal.

    Steep segments get one pixel per column, so gaps appear where |dy| > |dx|.
    """
    x1, y1 = p1
    x2, y2 = p2
    if x1 == x2:
        lo, hi = sorted((y1, y2))
        return [(x1, y) for y in range(lo, hi + 1)]
    if y1 == y2:
        lo, hi = sorted((x1, x2))
        return [(x, y1) for x in range(lo, hi + 1)]
    if x1 > x2:
        x1, y1, x2, y2 = x2, y2, x1, y1
    slope = (y2 - y1) / (x2 - x1)
    intercept = y1 - math.trunc(slope * x1)
    xs = np.arange(x1, x2 + 1, dtype=np.int64)
    ys = np.trunc(slope * xs).astype(np.int64) + intercept
    return list(zip(xs.tolist(), ys.tolist()))


def _coord(p: Point) -> Coord:
    if p.x < 0 or p.y < 0:
        raise ValueError(f"cannot rasterize negative coordinate ({p.x}, {p.y})")
    return (p.x, p.y)


def _line(line: Line) -> list[Coord]:
    points = [_coord(p) for p in line.points()]
    if len(points) < 2:
        raise ValueError("a rasterized line needs at least two points")
    coords: list[Coord] = []
    for p1, p2 in zip(points, points[1:]):
        coords.extend(segment(p1, p2))
    return coords


def _rect(rect: Rect) -> list[Coord]:
    x, y = _coord(rect.origin)
    w, h = rect.width, rect.height
    tl, tr = (x, y), (x + w, y)
    bl, br = (x, y + h), (x + w, y + h)
    coords: list[Coord] = []
    for p1, p2 in ((tl, tr), (bl, br), (tl, bl), (tr, br)):
        coords.extend(segment(p1, p2))
    return coords
