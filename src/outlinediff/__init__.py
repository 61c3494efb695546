"""Pixel-exact image comparison with outlined difference regions."""

from __future__ import annotations

from .compare import ErrorKind, Result, Status, compare_files, compare_images
from .core import Color, Edge, Point, Raster
from .presets import ScanParams, get_preset, iter_presets

__all__ = [
    "compare_files",
    "compare_images",
    "Result",
    "Status",
    "ErrorKind",
    "Color",
    "Edge",
    "Point",
    "Raster",
    "ScanParams",
    "get_preset",
    "iter_presets",
]

__version__ = "0.1.0"
