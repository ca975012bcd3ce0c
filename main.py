from __future__ import annotations

import argparse
import logging
from pathlib import Path

from mirage_core import (
    DEFAULT_RASTER_CONFIG,
    Image,
    PixelType,
    load_raster_config,
    surface_from_file,
)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="mirage")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    raster = sub.add_parser("rasterize", help="Rasterize an SVG file into an image file.")
    raster.add_argument("svg", type=Path)
    raster.add_argument("output", type=Path)
    raster.add_argument(
        "--width",
        type=int,
        default=None,
        help="Image width. Default: the surface's bounding width + 1.",
    )
    raster.add_argument(
        "--height",
        type=int,
        default=None,
        help="Image height. Default: the surface's bounding height + 1.",
    )
    raster.add_argument("--pixel", choices=["rgb", "rgba"], default="rgb")
    raster.add_argument("--config", type=Path, default=None, help="TOML file with a [raster] table.")
    raster.add_argument("--translate", type=int, nargs=2, metavar=("DX", "DY"), default=None)
    raster.add_argument("--scale", type=float, default=None)

    dim = sub.add_parser("dimension", help="Print the bounding extent of an SVG file's surface.")
    dim.add_argument("svg", type=Path)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "rasterize":
        surface = surface_from_file(args.svg)
        if args.translate is not None:
            surface.translate(*args.translate)
        if args.scale is not None:
            surface.scale(args.scale)
        config = load_raster_config(args.config) if args.config is not None else DEFAULT_RASTER_CONFIG
        width, height = _resolve_dimensions(surface.dimension().as_tuple(), args.width, args.height)
        image = Image(str(args.output), width, height, PixelType(args.pixel), config)
        report = image.write(surface)
        out = image.save()
        print(f"wrote {out}: pixels={report.written} out_of_bounds={report.out_of_bounds}")
        return

    if args.command == "dimension":
        surface = surface_from_file(args.svg)
        x, y = surface.dimension().as_tuple()
        print(f"{x} {y}")
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _resolve_dimensions(extent: tuple[int, int], width: int | None, height: int | None) -> tuple[int, int]:
    if width is None:
        width = max(1, extent[0] + 1)
    if height is None:
        height = max(1, extent[1] + 1)
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    return width, height


if __name__ == "__main__":
    main()
