from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypeAlias

from .objects import Point, PointLike, Rect


class ImageFormat(Enum):
    RGB8 = "rgb8"


@dataclass(frozen=True)
class ImagePath:
    path: Path


@dataclass(frozen=True)
class ImageData:
    data: bytes
    image_format: ImageFormat
    width: int
    height: int


ImageSource: TypeAlias = ImagePath | ImageData


@dataclass(frozen=True)
class Rgb:
    red: float
    green: float
    blue: float


@dataclass(frozen=True)
class Rgba:
    red: float
    green: float
    blue: float
    alpha: float


@dataclass(frozen=True)
class DrawText:
    text: str


@dataclass(frozen=True)
class DrawImage:
    point: Point
    source: ImageSource


@dataclass(frozen=True)
class FontSize:
    size: float


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class RelLineTo:
    point: Point


@dataclass(frozen=True)
class DrawRect:
    rect: Rect


@dataclass(frozen=True)
class ScaleBy:
    x: float
    y: float


@dataclass(frozen=True)
class Rotate:
    angle: float


@dataclass(frozen=True)
class TranslateBy:
    x: float
    y: float


@dataclass(frozen=True)
class Stroke:
    pass


@dataclass(frozen=True)
class Fill:
    pass


@dataclass(frozen=True)
class Paint:
    pass


Command: TypeAlias = (
    Rgb
    | Rgba
    | DrawText
    | DrawImage
    | FontSize
    | MoveTo
    | LineTo
    | RelLineTo
    | DrawRect
    | ScaleBy
    | Rotate
    | TranslateBy
    | Stroke
    | Fill
    | Paint
)


@dataclass
class Context:
    """Append-only log of drawing commands, kept in the order they were issued."""

    _commands: list[Command] = field(default_factory=list)

    def commands(self) -> list[Command]:
        return list(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def rgb(self, red: float, green: float, blue: float) -> None:
        self._commands.append(Rgb(red, green, blue))

    def rgba(self, red: float, green: float, blue: float, alpha: float) -> None:
        self._commands.append(Rgba(red, green, blue, alpha))

    def text(self, text: str) -> None:
        self._commands.append(DrawText(str(text)))

    def image(self, path: str | Path, point: PointLike) -> None:
        self._commands.append(DrawImage(Point.of(point), ImagePath(Path(path))))

    def image_data(
        self,
        data: bytes,
        image_format: ImageFormat,
        point: PointLike,
        width: int,
        height: int,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image width and height must be > 0")
        source = ImageData(data=bytes(data), image_format=image_format, width=width, height=height)
        self._commands.append(DrawImage(Point.of(point), source))

    def font_size(self, size: float) -> None:
        self._commands.append(FontSize(size))

    def move_to(self, point: PointLike) -> None:
        self._commands.append(MoveTo(Point.of(point)))

    def line_to(self, point: PointLike) -> None:
        self._commands.append(LineTo(Point.of(point)))

    def rel_line_to(self, point: PointLike) -> None:
        self._commands.append(RelLineTo(Point.of(point)))

    def rect(self, point: PointLike, width: int, height: int) -> None:
        self._commands.append(DrawRect(Rect(Point.of(point), width, height)))

    def scale(self, x: float, y: float) -> None:
        self._commands.append(ScaleBy(x, y))

    def rotate(self, angle: float) -> None:
        self._commands.append(Rotate(angle))

    def translate(self, x: float, y: float) -> None:
        self._commands.append(TranslateBy(x, y))

    def stroke(self) -> None:
        self._commands.append(Stroke())

    def fill(self) -> None:
        self._commands.append(Fill())

    def paint(self) -> None:
        self._commands.append(Paint())
