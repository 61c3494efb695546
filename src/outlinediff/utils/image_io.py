"""Reading and writing RGB buffers."""
from __future__ import annotations

import logging
from pathlib import Path

import fitz
import numpy as np
from PIL import Image

from ..errors import ImageDecodeError, ImageEncodeError

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


def decode(path: str | Path, *, page: int = 0, dpi: int = 72) -> np.ndarray:
    """Return the contents of ``path`` as an ``(H, W, 3)`` uint8 RGB array.

    PDF files are rasterised page by page with PyMuPDF, anything else goes
    through Pillow. Alpha channels are discarded.
    """

    path = Path(path)
    if path.suffix.lower() == PDF_SUFFIX:
        array = rasterize_page(path, page, dpi)
    else:
        array = _read_image(path)
    height, width = array.shape[:2]
    if width == 0 or height == 0:
        raise ImageDecodeError(f"Image '{path}' is empty")
    logger.debug("Decoded %s: %dx%d", path, width, height)
    return array


def rasterize_page(pdf_path: str | Path, page_num: int, dpi: int) -> np.ndarray:
    try:
        doc = fitz.open(str(pdf_path))
    except (RuntimeError, OSError, ValueError) as exc:
        raise ImageDecodeError(f"Cannot open PDF '{pdf_path}': {exc}") from exc
    try:
        if not 0 <= page_num < len(doc):
            raise ImageDecodeError(
                f"PDF '{pdf_path}' has {len(doc)} page(s), page {page_num} requested"
            )
        zoom = dpi / 72.0
        mat = fitz.Matrix(zoom, zoom)
        pm = doc[page_num].get_pixmap(matrix=mat, colorspace=fitz.csRGB, alpha=False)
        img = np.frombuffer(pm.samples, dtype=np.uint8).reshape(pm.height, pm.width, pm.n)
        return img[:, :, :3].copy()
    finally:
        doc.close()


def _read_image(path: Path) -> np.ndarray:
    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
    except (OSError, ValueError) as exc:
        raise ImageDecodeError(f"Cannot read image '{path}': {exc}") from exc
    return np.asarray(rgb, dtype=np.uint8).copy()


def encode(array: np.ndarray, path: str | Path) -> None:
    """Write an ``(H, W, 3)`` uint8 array to ``path``.

    The format follows the file suffix and falls back to PNG.
    """

    out_path = Path(path)
    image_format = Image.registered_extensions().get(out_path.suffix.lower(), "PNG")
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(np.ascontiguousarray(array, dtype=np.uint8)).save(out_path, format=image_format)
    except (OSError, ValueError, TypeError) as exc:
        raise ImageEncodeError(f"Cannot write image '{out_path}': {exc}") from exc
    logger.debug("Wrote %s (%s)", out_path, image_format)
