from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image as PILImage

if TYPE_CHECKING:
    from .image import Image


LOGGER = logging.getLogger(__name__)


def to_pil(image: "Image") -> PILImage.Image:
    pil = PILImage.fromarray(image.as_array())
    if pil.mode != image.pixel.mode:
        pil = pil.convert(image.pixel.mode)
    return pil


def save_image(image: "Image", path: str | Path) -> Path:
    """Encode the buffer with Pillow; the format follows the file suffix."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    to_pil(image).save(out)
    LOGGER.debug("saved %dx%d %s image to %s", image.width, image.height, image.pixel.name, out)
    return out
