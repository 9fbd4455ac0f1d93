import logging
import re
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

RESAMPLE = Image.LANCZOS

_DIMENSIONS = re.compile(r"^\s*(\d+)\s*x\s*(\d+)\s*$")


def parse_dimensions(text: str) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` string such as ``"120x40"``."""
    match = _DIMENSIONS.match(text)
    if match is None:
        raise ValueError(f"Invalid dimensions {text!r}, expected WIDTHxHEIGHT (e.g. 120x40)")
    width, height = int(match.group(1)), int(match.group(2))
    if width == 0 or height == 0:
        raise ValueError(f"Invalid dimensions {text!r}, width and height must be positive")
    return width, height


def load_image(path: str | Path) -> Image.Image:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'"{path}" does not exist')
    if not path.is_file():
        raise IsADirectoryError(f'"{path}" is not a file')
    image = Image.open(path)
    image.load()
    return image


def to_brightness(image: Image.Image, dimensions: tuple[int, int] | None = None) -> np.ndarray:
    """Reduce an image to one luma byte per pixel, optionally resized to (width, height)."""
    gray = image.convert("L")
    if dimensions is not None:
        logger.debug("Resizing %dx%d to %dx%d", gray.width, gray.height, *dimensions)
        gray = gray.resize(dimensions, RESAMPLE)
    return np.asarray(gray, dtype=np.uint8)


def as_brightness_grid(data) -> np.ndarray:
    """Normalise an image, array or nested rows into a 2-D uint8 brightness grid."""
    if isinstance(data, Image.Image):
        return to_brightness(data)
    arr = np.asarray(data)
    if arr.ndim != 2:
        raise ValueError(f"Brightness grid must be 2-D, got shape {arr.shape}")
    if arr.dtype == np.uint8:
        return arr
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Brightness samples must be integers, got {arr.dtype}")
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ValueError("Brightness samples must be within 0-255")
    return arr.astype(np.uint8)
