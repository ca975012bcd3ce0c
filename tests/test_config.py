from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from mirage_core.config import BACKGROUND, DEFAULT_RASTER_CONFIG, RasterConfig, load_raster_config
from mirage_core.raster import PixelType


class RasterConfigTests(unittest.TestCase):
    def test_package_import_builds_default_config(self) -> None:
        import mirage_core

        self.assertEqual(mirage_core.DEFAULT_RASTER_CONFIG.background, 0xFF)
        self.assertIs(mirage_core.DEFAULT_RASTER_CONFIG, DEFAULT_RASTER_CONFIG)

    def test_defaults(self) -> None:
        self.assertEqual(DEFAULT_RASTER_CONFIG.background, BACKGROUND)
        self.assertEqual(DEFAULT_RASTER_CONFIG.stroke_for(PixelType.RGB), (0, 0, 0))
        self.assertEqual(DEFAULT_RASTER_CONFIG.stroke_for(PixelType.RGBA), (0, 0, 0, 255))

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RasterConfig(background=300)
        with self.assertRaises(ValueError):
            RasterConfig(rgb_stroke=(0, 0, 0, 0))

    def test_load_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "mirage.toml"
            path.write_text(
                '[raster]\nbackground = 0\nrgba_stroke = [255, 0, 0, 128]\n',
                encoding="utf-8",
            )
            config = load_raster_config(path)
        self.assertEqual(config.background, 0)
        self.assertEqual(config.rgb_stroke, (0, 0, 0))
        self.assertEqual(config.rgba_stroke, (255, 0, 0, 128))

    def test_load_rejects_bad_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "mirage.toml"
            path.write_text('[raster]\nrgb_stroke = [1, 2]\n', encoding="utf-8")
            with self.assertRaises(ValueError):
                load_raster_config(path)
            path.write_text('raster = 3\n', encoding="utf-8")
            with self.assertRaises(ValueError):
                load_raster_config(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_raster_config("/nonexistent/mirage.toml")


if __name__ == "__main__":
    unittest.main()
