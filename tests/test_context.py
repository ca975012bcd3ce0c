from __future__ import annotations

from pathlib import Path
import unittest

from mirage_core.context import (
    Context,
    DrawImage,
    DrawRect,
    DrawText,
    Fill,
    ImageData,
    ImageFormat,
    ImagePath,
    LineTo,
    Paint,
    Stroke,
)
from mirage_core.objects import Point, Rect


class ContextTests(unittest.TestCase):
    def test_commands_recorded_in_order(self) -> None:
        cx = Context()
        cx.text("hello world")
        cx.line_to((4, 5))
        cx.rect((3, 6), 30, 50)
        cx.stroke()
        cx.fill()
        cx.image("image.png", (0, 0))
        cx.image_data(b"\x00\xff", ImageFormat.RGB8, (0, 0), 20, 20)
        cx.paint()
        self.assertEqual(
            cx.commands(),
            [
                DrawText("hello world"),
                LineTo(Point(4, 5)),
                DrawRect(Rect((3, 6), 30, 50)),
                Stroke(),
                Fill(),
                DrawImage(Point(0, 0), ImagePath(Path("image.png"))),
                DrawImage(Point(0, 0), ImageData(b"\x00\xff", ImageFormat.RGB8, 20, 20)),
                Paint(),
            ],
        )
        self.assertEqual(len(cx), 8)

    def test_commands_returns_copy(self) -> None:
        cx = Context()
        cx.rgb(1.0, 0.0, 0.0)
        cx.commands().clear()
        self.assertEqual(len(cx), 1)

    def test_image_data_size_validated(self) -> None:
        with self.assertRaises(ValueError):
            Context().image_data(b"", ImageFormat.RGB8, (0, 0), 0, 4)


if __name__ == "__main__":
    unittest.main()
