from __future__ import annotations

import unittest

from mirage_core.objects import Bitmap, Line, Point, Rect, Text
from mirage_core.surface import Group, Meta, Surface


def _scene() -> Surface:
    return Surface(
        [
            Point(1, 2),
            Line.from_points([(0, 0), (4, 6)]),
            Group(Meta(name="badge"), [Point(9, 9)]),
            Rect((10, 10), 5, 5),
        ]
    )


class SurfaceTests(unittest.TestCase):
    def test_empty_surface_dimension(self) -> None:
        self.assertEqual(Surface().dimension(), Point(0, 0))
        self.assertEqual(len(Surface([])), 0)

    def test_single_rect_dimension(self) -> None:
        self.assertEqual(Surface([Rect((10, 10), 5, 5)]).dimension(), Point(15, 15))

    def test_dimension_is_componentwise_max(self) -> None:
        surface = Surface([Point(30, 1), Line.from_points([(0, 0), (2, 40)]), Text((0, 0), "ab", 4)])
        self.assertEqual(surface.dimension(), Point(30, 40))

    def test_dimension_ignores_groups(self) -> None:
        surface = Surface([Group(objects=[Point(100, 100)]), Point(3, 4)])
        self.assertEqual(surface.dimension(), Point(3, 4))

    def test_translate_reaches_top_level_primitives_only(self) -> None:
        surface = _scene()
        surface.translate(5, -1)
        point, line, group, rect = surface.objects
        self.assertEqual(point, Point(6, 1))
        self.assertEqual([p.as_tuple() for p in line.points()], [(5, -1), (9, 5)])
        self.assertEqual(rect.origin, Point(15, 9))
        self.assertEqual(group.objects, [Point(9, 9)])

    def test_translate_round_trip(self) -> None:
        surface = _scene()
        surface.translate_x(12)
        surface.translate_y(-3)
        surface.translate(-12, 3)
        self.assertEqual(surface.objects, _scene().objects)

    def test_scale_and_position(self) -> None:
        surface = Surface([Point(1, 2), Rect((3, 4), 1, 1)])
        surface.scale(3)
        self.assertEqual(surface.objects, [Point(3, 6), Rect((9, 12), 3, 3)])
        surface.scale_x(0.5)
        surface.scale_y(2)
        self.assertEqual(surface.objects, [Point(1, 12), Rect((4, 24), 2, 6)])
        surface.position(7, 8)
        self.assertEqual([p.point() for p in surface.primitives()], [Point(7, 8), Point(7, 8)])

    def test_append_drains_other(self) -> None:
        first = Surface([Point(0, 0)])
        second = Surface([Point(1, 1), Point(1, 1)])
        first.append(second)
        self.assertEqual(first.objects, [Point(0, 0), Point(1, 1), Point(1, 1)])
        self.assertEqual(len(second), 0)

    def test_append_to_self_is_noop(self) -> None:
        surface = Surface([Point(0, 0)])
        surface.append(surface)
        self.assertEqual(surface.objects, [Point(0, 0)])

    def test_rejects_foreign_objects(self) -> None:
        with self.assertRaises(TypeError):
            Surface([(1, 2)])  # type: ignore[list-item]
        with self.assertRaises(TypeError):
            Surface([Bitmap((0, 0), b"", 0, 0)])  # type: ignore[list-item]

    def test_iteration_preserves_order(self) -> None:
        surface = _scene()
        self.assertEqual([type(o).__name__ for o in surface], ["Point", "Line", "Group", "Rect"])
        self.assertEqual(len(list(surface.primitives())), 3)


if __name__ == "__main__":
    unittest.main()
