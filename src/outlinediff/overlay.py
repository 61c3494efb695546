"""Outline rendering onto rasters."""
from __future__ import annotations

from typing import Iterable

from .core.contours import Contour
from .core.raster import Raster
from .core.types import RED, Color


def draw_contours(raster: Raster, contours: Iterable[Contour], color: Color = RED) -> None:
    """Paint every edge of ``contours`` onto ``raster`` in place."""

    for contour in contours:
        for edge in contour:
            raster.draw_line(edge.begin, edge.end, color)


def render_difference(image: Raster, contours: Iterable[Contour], color: Color = RED) -> Raster:
    """Return a copy of ``image`` with the contours drawn on it.

    ``image`` itself is left untouched.
    """

    output = image.copy()
    draw_contours(output, contours, color)
    return output
