import io
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from PIL import Image

from charify.charsets import build_charset
from charify.grid import load_image, to_brightness
from charify.quantize import build_lookup
from charify.render import RenderReport, render

logger = logging.getLogger(__name__)


def open_destination(path: str | Path) -> TextIO:
    """Create missing parent directories and open ``path`` for writing, truncating it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("w", encoding="utf-8", newline="\n")


def convert(charset: Sequence[str], grid, sink: TextIO, fail_fast: bool = False) -> RenderReport:
    return render(charset, grid, sink, fail_fast=fail_fast)


def image_to_text(
    image: Image.Image | str | Path,
    charset: Sequence[str] | None = None,
    dimensions: tuple[int, int] | None = None,
) -> str:
    if charset is None:
        charset = build_charset()
    if not isinstance(image, Image.Image):
        image = load_image(image)
    grid = to_brightness(image, dimensions)
    out = io.StringIO()
    convert(charset, grid, out, fail_fast=True)
    return out.getvalue()


def convert_file(
    image_path: str | Path,
    destination: str | Path,
    charset: Sequence[str] | None = None,
    dimensions: tuple[int, int] | None = None,
    fail_fast: bool = False,
) -> RenderReport:
    """Render the image at ``image_path`` into the text file ``destination``."""
    if charset is None:
        charset = build_charset()
    # Reject an empty charset before the destination gets truncated
    build_lookup(charset)
    image = load_image(image_path)
    logger.debug("Loaded %s (%dx%d, mode %s)", image_path, image.width, image.height, image.mode)
    grid = to_brightness(image, dimensions)
    with open_destination(destination) as sink:
        return convert(charset, grid, sink, fail_fast=fail_fast)
