"""Image files used as cels in HTML previews."""

import base64
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Iterable

from PIL import Image, UnidentifiedImageError

from .constants import PREVIEW_IMAGE_FORMAT
from .errors import CelImageError


@dataclass(frozen=True)
class CelImage:
    path: str
    width: int
    height: int
    data_url: str


def load_cel_images(paths: Iterable[str | Path]) -> tuple[CelImage, ...]:
    """
    Load image files and embed each one as a data URL.

    Args:
        paths: Image files, one per cel, in child order

    Returns:
        Loaded cel images in the given order

    Raises:
        CelImageError: If a file is missing or is not a readable image
    """
    return tuple(load_cel_image(path) for path in paths)


def load_cel_image(path: str | Path) -> CelImage:
    try:
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
    except FileNotFoundError:
        raise CelImageError(f"Image '{path}' not found")
    except (UnidentifiedImageError, OSError) as e:
        raise CelImageError(f"Cannot read image '{path}': {e}")

    return CelImage(
        path=str(path),
        width=rgba.width,
        height=rgba.height,
        data_url=encode_data_url(rgba),
    )


def encode_data_url(image: Image.Image) -> str:
    """Encode a single image as a lossless WebP data URL."""
    buffer = BytesIO()
    image.save(buffer, format=PREVIEW_IMAGE_FORMAT, lossless=True, quality=100, method=4)
    base64_data = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/{PREVIEW_IMAGE_FORMAT};base64,{base64_data}"
