"""In-memory RGB raster."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np

from ..errors import ImageDecodeError, ImageEncodeError
from ..utils import image_io
from .types import BLACK, Color, Point

logger = logging.getLogger(__name__)


class Raster:
    """RGB pixel buffer of shape ``(height, width, 3)``.

    A raster without data is *null*. Null rasters report zero dimensions,
    read back black pixels and ignore writes, which is how a missing or
    undecodable image is represented. Zero-sized buffers become null.
    """

    def __init__(self, data: Optional[np.ndarray] = None) -> None:
        if data is not None:
            if data.ndim != 3 or data.shape[2] != 3:
                raise ValueError(f"Expected an (H, W, 3) array, got shape {data.shape}")
            # A zero-sized buffer holds no image.
            if data.shape[0] == 0 or data.shape[1] == 0:
                data = None
        self._data = data

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Raster":
        array = np.asarray(array)
        if array.ndim == 2:
            array = np.repeat(array[:, :, None], 3, axis=2)
        if array.ndim != 3 or array.shape[2] < 3:
            raise ValueError(f"Expected an (H, W, 3) array, got shape {array.shape}")
        return cls(np.array(array[:, :, :3], dtype=np.uint8, copy=True))

    @classmethod
    def blank(cls, width: int, height: int, color: Color = BLACK) -> "Raster":
        data = np.empty((height, width, 3), dtype=np.uint8)
        data[:, :] = color.to_tuple()
        return cls(data)

    @classmethod
    def open(cls, path: str | Path, *, page: int = 0, dpi: int = 72) -> "Raster":
        try:
            return cls(image_io.decode(path, page=page, dpi=dpi))
        except ImageDecodeError as exc:
            logger.error("Error reading image file %s: %s", path, exc)
            return cls()

    @property
    def is_null(self) -> bool:
        return self._data is None

    @property
    def width(self) -> int:
        return 0 if self._data is None else int(self._data.shape[1])

    @property
    def height(self) -> int:
        return 0 if self._data is None else int(self._data.shape[0])

    def pixel(self, row: int, column: int) -> Color:
        if self._data is None:
            return Color()
        assert 0 <= row < self.height and 0 <= column < self.width, (row, column)
        red, green, blue = self._data[row, column]
        return Color(int(red), int(green), int(blue))

    def set_pixel(self, row: int, column: int, color: Color) -> None:
        if self._data is None:
            return
        assert 0 <= row < self.height and 0 <= column < self.width, (row, column)
        self._data[row, column] = color.to_tuple()

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        """Fill the box spanned by ``start`` and ``end``, both inclusive.

        Contour edges are axis aligned, so this paints a horizontal or
        vertical segment.
        """

        if self._data is None:
            return
        x0, x1 = sorted((start.x, end.x))
        y0, y1 = sorted((start.y, end.y))
        assert 0 <= x0 and x1 < self.width and 0 <= y0 and y1 < self.height, (start, end)
        self._data[y0 : y1 + 1, x0 : x1 + 1] = color.to_tuple()

    def region(self, x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
        """Read-only view of columns ``x0:x1`` and rows ``y0:y1``."""
        if self._data is None:
            return np.zeros((0, 0, 3), dtype=np.uint8)
        view = self._data[y0:y1, x0:x1]
        view.flags.writeable = False
        return view

    def copy(self) -> "Raster":
        return Raster(None if self._data is None else self._data.copy())

    def to_array(self) -> np.ndarray:
        if self._data is None:
            return np.zeros((0, 0, 3), dtype=np.uint8)
        return self._data.copy()

    def save(self, path: str | Path) -> bool:
        if self._data is None:
            return False
        try:
            image_io.encode(self._data, path)
        except ImageEncodeError as exc:
            logger.error("Failed to save image %s: %s", path, exc)
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        if self._data is None or other._data is None:
            return self._data is None and other._data is None
        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._data is None:
            return "Raster(null)"
        return f"Raster({self.width}x{self.height})"
