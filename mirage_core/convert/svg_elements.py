from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from pathlib import Path
from typing import Optional, TypeAlias
import xml.etree.ElementTree as ET

from ..errors import ParseError


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SvgLine:
    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0


@dataclass(frozen=True)
class SvgRect:
    x: Optional[int] = None
    y: Optional[int] = None
    rx: Optional[int] = None
    ry: Optional[int] = None
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class SvgText:
    x: int = 0
    y: int = 0
    text: str = ""
    font_size: Optional[int] = None


@dataclass(frozen=True)
class SvgPolyline:
    points: tuple[tuple[int, int], ...] = ()


SvgShape: TypeAlias = SvgLine | SvgRect | SvgText | SvgPolyline


@dataclass(frozen=True)
class SvgDocument:
    x: int = 0
    y: int = 0
    shapes: tuple[SvgShape, ...] = field(default_factory=tuple)


def parse_markup(svg_markup: str) -> SvgDocument:
    try:
        root = ET.fromstring(svg_markup)
    except ET.ParseError as exc:
        raise ParseError(f"malformed svg markup: {exc}") from exc
    return _from_root(root)


def parse_file(path: str | Path) -> SvgDocument:
    try:
        root = ET.parse(Path(path)).getroot()
    except ET.ParseError as exc:
        raise ParseError(f"malformed svg file {path}: {exc}") from exc
    return _from_root(root)


def _from_root(root: ET.Element) -> SvgDocument:
    tag = _strip_namespace(root.tag)
    if tag != "svg":
        raise ParseError(f"expected <svg> root element, got <{tag}>")
    shapes: list[SvgShape] = []
    ignored = 0
    for elem in root:
        tag = _strip_namespace(elem.tag)
        if tag == "line":
            shapes.append(_parse_line(elem))
        elif tag == "rect":
            shapes.append(_parse_rect(elem))
        elif tag == "text":
            shapes.append(_parse_text(elem))
        elif tag == "polyline":
            shapes.append(_parse_polyline(elem))
        else:
            ignored += 1
    LOGGER.debug("parsed svg document: shapes=%d ignored_elements=%d", len(shapes), ignored)
    return SvgDocument(
        x=_parse_int(root.attrib.get("x"), "svg.x") or 0,
        y=_parse_int(root.attrib.get("y"), "svg.y") or 0,
        shapes=tuple(shapes),
    )


def _strip_namespace(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _parse_int(value: Optional[str], label: str) -> Optional[int]:
    if value is None:
        return None
    value = value.strip()
    if value.endswith("px"):
        value = value[:-2]
    try:
        number = float(value)
    except ValueError as exc:
        raise ParseError(f"{label} is not a number: {value!r}") from exc
    if not math.isfinite(number):
        raise ParseError(f"{label} is not finite: {value!r}")
    return math.trunc(number)


def _parse_size(value: Optional[str], label: str) -> int:
    size = _parse_int(value, label) or 0
    if size < 0:
        raise ParseError(f"{label} must be >= 0, got {size}")
    return size


def _parse_line(elem: ET.Element) -> SvgLine:
    return SvgLine(
        x1=_parse_int(elem.attrib.get("x1"), "line.x1") or 0,
        y1=_parse_int(elem.attrib.get("y1"), "line.y1") or 0,
        x2=_parse_int(elem.attrib.get("x2"), "line.x2") or 0,
        y2=_parse_int(elem.attrib.get("y2"), "line.y2") or 0,
    )


def _parse_rect(elem: ET.Element) -> SvgRect:
    return SvgRect(
        x=_parse_int(elem.attrib.get("x"), "rect.x"),
        y=_parse_int(elem.attrib.get("y"), "rect.y"),
        rx=_parse_int(elem.attrib.get("rx"), "rect.rx"),
        ry=_parse_int(elem.attrib.get("ry"), "rect.ry"),
        width=_parse_size(elem.attrib.get("width"), "rect.width"),
        height=_parse_size(elem.attrib.get("height"), "rect.height"),
    )


def _parse_text(elem: ET.Element) -> SvgText:
    font_size = elem.attrib.get("font-size")
    return SvgText(
        x=_parse_int(elem.attrib.get("x"), "text.x") or 0,
        y=_parse_int(elem.attrib.get("y"), "text.y") or 0,
        text=elem.text or "",
        font_size=None if font_size is None else _parse_size(font_size, "text.font-size"),
    )


def _parse_polyline(elem: ET.Element) -> SvgPolyline:
    value = elem.attrib.get("points")
    if not value:
        return SvgPolyline()
    parts = value.replace(",", " ").split()
    if len(parts) % 2:
        raise ParseError(f"polyline.points has an odd number of coordinates: {value!r}")
    numbers = [_parse_int(p, "polyline.points") for p in parts]
    it = iter(numbers)
    return SvgPolyline(points=tuple((x, y) for x, y in zip(it, it)))
