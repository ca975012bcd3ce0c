from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Iterable, TypeAlias

from ..config import DEFAULT_FONT_SIZE
from .transform import Scale, Translate


@dataclass(order=True)
class Point(Scale):
    """A single integer location; also the building block of every other shape."""

    x: int
    y: int

    @classmethod
    def of(cls, value: "PointLike") -> "Point":
        if isinstance(value, Point):
            return cls(value.x, value.y)
        x, y = value
        return cls(int(x), int(y))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def max(self, other: "Point") -> "Point":
        return Point(max(self.x, other.x), max(self.y, other.y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def point(self) -> "Point":
        return self

    def extent(self) -> "Point":
        return Point(self.x, self.y)


PointLike: TypeAlias = Point | tuple[int, int]


@dataclass
class Line(Scale):
    """A path stored as an absolute `begin` plus offsets relative to the previous point."""

    begin: Point
    path: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.begin = Point.of(self.begin)
        self.path = [Point.of(p) for p in self.path]

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> "Line":
        absolute = [Point.of(p) for p in points]
        if not absolute:
            raise ValueError("a line needs at least one point")
        path = [cur - prev for prev, cur in zip(absolute, absolute[1:])]
        return cls(begin=absolute[0], path=path)

    def point(self) -> Point:
        return self.begin

    def points(self) -> list[Point]:
        """Resolve the path into absolute points, `begin` first."""
        current = Point.of(self.begin)
        resolved = [current]
        for offset in self.path:
            current = current + offset
            resolved.append(current)
        return resolved

    def scaled_points(self) -> list[Point]:
        # begin and every relative offset
        return [self.begin, *self.path]

    def extent(self) -> Point:
        points = self.points()
        bound = points[0]
        for p in points[1:]:
            bound = bound.max(p)
        return bound


@dataclass
class Rect(Scale):
    origin: Point
    width: int
    height: int

    def __post_init__(self) -> None:
        self.origin = Point.of(self.origin)
        if self.width < 0 or self.height < 0:
            raise ValueError(f"rect dimensions must be >= 0, got {self.width}x{self.height}")

    def point(self) -> Point:
        return self.origin

    def corner(self) -> Point:
        return Point(self.origin.x + self.width, self.origin.y + self.height)

    def extent(self) -> Point:
        return self.corner()

    def _scale_axes(self, fx: float, fy: float) -> None:
        p = self.origin
        x0, x1 = sorted((p.x * fx, (p.x + self.width) * fx))
        y0, y1 = sorted((p.y * fy, (p.y + self.height) * fy))
        p.x = math.trunc(x0)
        p.y = math.trunc(y0)
        self.width = math.trunc(x1) - p.x
        self.height = math.trunc(y1) - p.y


@dataclass
class Text(Scale):
    """A positioned string. `size` is a nominal metric, glyphs are never laid out."""

    origin: Point
    text: str
    size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        self.origin = Point.of(self.origin)
        if self.size < 0:
            raise ValueError(f"text size must be >= 0, got {self.size}")

    def point(self) -> Point:
        return self.origin

    def extent(self) -> Point:
        # font size doubles as the line height
        return Point(self.origin.x + len(self.text) * self.size, self.origin.y + self.size)


@dataclass
class Bitmap(Translate):
    """Raw image data placed at `origin`; moves with its anchor, never scaled."""

    origin: Point
    data: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        self.origin = Point.of(self.origin)
        self.data = bytes(self.data)
        if self.width < 0 or self.height < 0:
            raise ValueError(f"bitmap dimensions must be >= 0, got {self.width}x{self.height}")

    def point(self) -> Point:
        return self.origin
