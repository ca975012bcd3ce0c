from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from PIL import Image as PILImage

from mirage_core.convert import surface_from_markup
from mirage_core.raster import Image, PixelType, to_pil


class ExportTests(unittest.TestCase):
    def test_to_pil_matches_buffer(self) -> None:
        image = Image("pic.png", 6, 4, PixelType.RGBA)
        image.write_pixel((1, 2, 3, 4), (5, 3))
        pil = to_pil(image)
        self.assertEqual(pil.mode, "RGBA")
        self.assertEqual(pil.size, (6, 4))
        self.assertEqual(pil.getpixel((5, 3)), (1, 2, 3, 4))

    def test_save_png_round_trip(self) -> None:
        surface = surface_from_markup('<svg><rect x="1" y="1" width="3" height="2" /></svg>')
        with tempfile.TemporaryDirectory() as tmp:
            image = Image(str(Path(tmp) / "out" / "rect.png"), 8, 8, PixelType.RGB)
            image.write(surface)
            out = image.save()
            self.assertTrue(out.exists())
            with PILImage.open(out) as loaded:
                self.assertEqual(loaded.mode, "RGB")
                self.assertEqual(loaded.getpixel((1, 1)), (0, 0, 0))
                self.assertEqual(loaded.getpixel((2, 2)), (255, 255, 255))
                self.assertEqual(loaded.tobytes(), image.to_bytes())


if __name__ == "__main__":
    unittest.main()
