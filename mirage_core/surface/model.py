from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, TypeAlias

from ..objects import Line, Point, Rect, Text


Primitive: TypeAlias = Point | Line | Rect | Text
PRIMITIVE_TYPES = (Point, Line, Rect, Text)


@dataclass
class Meta:
    name: str | None = None
    position: Point = field(default_factory=lambda: Point(0, 0))


@dataclass
class Group:
    """A named sub-collection of objects."""

    meta: Meta = field(default_factory=Meta)
    objects: list["Object"] = field(default_factory=list)


Object: TypeAlias = Primitive | Group


class Surface:
    """Ordered collection of objects handed to the rasterizer.

    Whole-surface transforms reach top-level primitives only; objects nested in
    a Group keep their geometry.
    """

    def __init__(self, objects: Iterable[Object] | None = None, meta: Meta | None = None) -> None:
        self.meta = meta if meta is not None else Meta()
        self.objects: list[Object] = list(objects) if objects is not None else []
        for obj in self.objects:
            _require_object(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Object]:
        return iter(self.objects)

    def __repr__(self) -> str:
        return f"Surface(meta={self.meta!r}, objects={self.objects!r})"

    def primitives(self) -> Iterator[Primitive]:
        for obj in self.objects:
            if isinstance(obj, PRIMITIVE_TYPES):
                yield obj

    def translate(self, dx: int, dy: int) -> None:
        for p in self.primitives():
            p.translate(dx, dy)

    def translate_x(self, dx: int) -> None:
        for p in self.primitives():
            p.translate_x(dx)

    def translate_y(self, dy: int) -> None:
        for p in self.primitives():
            p.translate_y(dy)

    def scale(self, factor: float) -> None:
        for p in self.primitives():
            p.scale(factor)

    def scale_x(self, factor: float) -> None:
        for p in self.primitives():
            p.scale_x(factor)

    def scale_y(self, factor: float) -> None:
        for p in self.primitives():
            p.scale_y(factor)

    def position(self, x: int, y: int) -> None:
        for p in self.primitives():
            p.position(x, y)

    def append(self, other: "Surface") -> None:
        """Move every object of `other` onto the end of this surface, draining `other`."""
        if other is self:
            return
        self.objects.extend(other.objects)
        other.objects = []

    def dimension(self) -> Point:
        bound: Point | None = None
        for p in self.primitives():
            extent = p.extent()
            bound = extent if bound is None else bound.max(extent)
        if bound is None:
            return Point(0, 0)
        return bound


def _require_object(obj: object) -> None:
    if not isinstance(obj, (*PRIMITIVE_TYPES, Group)):
        raise TypeError(f"Unsupported surface object: {type(obj)!r}")
