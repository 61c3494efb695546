"""Pixel comparison of two rasters with outlined difference regions."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .core.contours import BoundaryEdgeSet, Contour
from .core.raster import Raster
from .core.scan import ScanCursor
from .core.types import Color, Edge
from .errors import ImageDecodeError
from .overlay import render_difference
from .presets import ScanParams
from .utils import image_io

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    UNKNOWN = "unknown"
    IDENTICAL = "identical"
    DIFFERENT = "different"


class ErrorKind(enum.Enum):
    NO_ERROR = "no_error"
    INVALID_IMAGE = "invalid_image"
    DIFFERENT_DIMENSIONS = "different_dimensions"


@dataclass(frozen=True)
class Result:
    """Outcome of a comparison.

    ``image`` is the second input with the differences outlined and is only
    set when ``status`` is ``DIFFERENT``.
    """

    status: Status
    error: ErrorKind = ErrorKind.NO_ERROR
    error_message: str = ""
    image: Optional[Raster] = None
    contours: Tuple[Tuple[Edge, ...], ...] = ()

    @property
    def contour_count(self) -> int:
        return len(self.contours)

    @property
    def ok(self) -> bool:
        return self.error is ErrorKind.NO_ERROR

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status.value,
            "error": self.error.value,
            "error_message": self.error_message,
            "contour_count": self.contour_count,
            "contours": [_contour_to_dict(contour) for contour in self.contours],
        }


def _contour_to_dict(contour: Tuple[Edge, ...]) -> Dict[str, object]:
    xs = [p.x for edge in contour for p in (edge.begin, edge.end)]
    ys = [p.y for edge in contour for p in (edge.begin, edge.end)]
    return {
        "edges": len(contour),
        "bbox": [min(xs), min(ys), max(xs), max(ys)],
    }


def compare_images(
    image1: Raster,
    image2: Raster,
    *,
    params: Optional[ScanParams] = None,
    highlight_color: Optional[Color] = None,
) -> Result:
    """Compare ``image1`` against ``image2``.

    Differences are outlined on a copy of ``image2``; neither input is
    modified.
    """

    params = params or ScanParams()
    color = highlight_color if highlight_color is not None else params.highlight_color

    if image1.is_null or image2.is_null:
        return Result(Status.UNKNOWN, ErrorKind.INVALID_IMAGE, "Invalid image provided")

    if image1.width != image2.width or image1.height != image2.height:
        return Result(
            Status.UNKNOWN,
            ErrorKind.DIFFERENT_DIMENSIONS,
            "Images have different dimensions",
        )

    cursor = ScanCursor(image1, image2, params.cell_width, params.cell_height)
    boundary = BoundaryEdgeSet()
    failed = 0
    for cell in cursor.failing_cells():
        boundary.add_rect(cell)
        failed += 1
    logger.debug(
        "Scanned %dx%d with %dx%d cells: %d failing, %d boundary edges",
        image1.width,
        image1.height,
        params.cell_width,
        params.cell_height,
        failed,
        len(boundary),
    )

    contours: List[Contour] = boundary.contours(join_corners=params.join_corners)
    if not contours:
        return Result(Status.IDENTICAL)

    logger.debug("Found %d contour(s)", len(contours))
    output = render_difference(image2, contours, color)
    return Result(
        Status.DIFFERENT,
        image=output,
        contours=tuple(tuple(contour) for contour in contours),
    )


def compare_files(
    file1: str | Path,
    file2: str | Path,
    *,
    params: Optional[ScanParams] = None,
    highlight_color: Optional[Color] = None,
) -> Result:
    """Decode two image files and compare them."""

    params = params or ScanParams()
    images = []
    for path in (file1, file2):
        try:
            array = image_io.decode(path, page=params.pdf_page, dpi=params.pdf_dpi)
        except ImageDecodeError as exc:
            logger.error("Error reading image file %s: %s", path, exc)
            return Result(Status.UNKNOWN, ErrorKind.INVALID_IMAGE, f"Invalid image provided: {exc}")
        images.append(Raster(array))
    return compare_images(images[0], images[1], params=params, highlight_color=highlight_color)
