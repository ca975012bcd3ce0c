from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shapes import Point


class Translate:
    """Moves a shape through its anchor point or, when it has one, its point set.

    Subclasses provide `point()`, the live anchor, and may override
    `point_set()` to return the live points that move together. With no point
    set only the anchor moves.
    """

    def point(self) -> "Point":
        raise NotImplementedError

    def point_set(self) -> list["Point"] | None:
        return None

    def translate(self, dx: int, dy: int) -> None:
        for p in self._translated_points():
            p.x += dx
            p.y += dy

    def translate_x(self, dx: int) -> None:
        self.translate(dx, 0)

    def translate_y(self, dy: int) -> None:
        self.translate(0, dy)

    def position(self, x: int, y: int) -> None:
        anchor = self.point()
        self.translate(x - anchor.x, y - anchor.y)

    def _translated_points(self) -> list["Point"]:
        points = self.point_set()
        if points is None:
            return [self.point()]
        return points


class Scale(Translate):
    """Scales about the origin, truncating every coordinate toward zero."""

    def scaled_points(self) -> list["Point"]:
        return self._translated_points()

    def scale(self, factor: float) -> None:
        self._scale_axes(factor, factor)

    def scale_x(self, factor: float) -> None:
        self._scale_axes(factor, 1)

    def scale_y(self, factor: float) -> None:
        self._scale_axes(1, factor)

    def _scale_axes(self, fx: float, fy: float) -> None:
        for p in self.scaled_points():
            p.x = math.trunc(p.x * fx)
            p.y = math.trunc(p.y * fy)
