"""Comparison engine: value types, raster buffer, scanning and contours."""

from .contours import BoundaryEdgeSet, Contour, extract_contours
from .raster import Raster
from .scan import ScanCell, ScanCursor
from .types import BLACK, RED, Color, Edge, Point

__all__ = [
    "BLACK",
    "RED",
    "BoundaryEdgeSet",
    "Color",
    "Contour",
    "Edge",
    "Point",
    "Raster",
    "ScanCell",
    "ScanCursor",
    "extract_contours",
]
