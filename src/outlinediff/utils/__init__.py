"""Utility functions used across the project."""

from .image_io import decode, encode, rasterize_page

__all__ = [
    "decode",
    "encode",
    "rasterize_page",
]
