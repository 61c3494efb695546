"""Cell-by-cell scan over two rasters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from .raster import Raster
from .types import Edge, Point


@dataclass(frozen=True)
class ScanCell:
    """Rectangle of the scanning grid, clipped to the shared limits.

    ::

        0 +---------+ 1          top
          |         |       left +---+ right
        3 +---------+ 2         bottom
    """

    origin: Point
    width: int
    height: int
    x_limit: int
    y_limit: int

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return ``(x0, y0, x1, y1)`` with exclusive upper bounds."""
        return (
            self.origin.x,
            self.origin.y,
            min(self.origin.x + self.width, self.x_limit),
            min(self.origin.y + self.height, self.y_limit),
        )

    def points(self) -> Tuple[Point, Point, Point, Point]:
        x0, y0, x1, y1 = self.bounds()
        return (Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1))

    def edges(self) -> Tuple[Edge, Edge, Edge, Edge]:
        """Top, right, bottom and left sides."""
        p0, p1, p2, p3 = self.points()
        return (Edge(p0, p1), Edge(p1, p2), Edge(p3, p2), Edge(p0, p3))


class ScanCursor:
    """Walks fixed-size cells over two rasters in row-major order.

    The shared limit is ``min(dimension) - 1`` on both axes, so the last
    pixel row and column never belong to a cell. Completion is only detected
    at the start of a row: the cursor is at its end once it has wrapped back
    to ``x == 0`` with ``y`` at or past the vertical limit.
    """

    def __init__(self, image1: Raster, image2: Raster, cell_width: int = 1, cell_height: int = 1) -> None:
        if cell_width < 1 or cell_height < 1:
            raise ValueError(f"Scan cell must be at least 1x1, got {cell_width}x{cell_height}")
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.x_limit = min(image1.width, image2.width) - 1
        self.y_limit = min(image1.height, image2.height) - 1
        self._x = 0
        self._y = 0

        shared_w = max(self.x_limit, 0)
        shared_h = max(self.y_limit, 0)
        self._mismatch = np.any(
            image1.region(0, 0, shared_w, shared_h) != image2.region(0, 0, shared_w, shared_h),
            axis=-1,
        )

    @property
    def origin(self) -> Point:
        return Point(self._x, self._y)

    @property
    def cell(self) -> ScanCell:
        return ScanCell(self.origin, self.cell_width, self.cell_height, self.x_limit, self.y_limit)

    @property
    def at_end(self) -> bool:
        return self._x == 0 and self._y >= self.y_limit

    def advance(self) -> None:
        if self.at_end:
            return
        if self._x < self.x_limit - self.cell_width:
            self._x += self.cell_width
        else:
            self._x = 0
            self._y += self.cell_height

    def test(self) -> bool:
        """True when no pixel of the current cell differs between the rasters."""
        x0, y0, x1, y1 = self.cell.bounds()
        return not self._mismatch[y0:y1, x0:x1].any()

    def __iter__(self) -> Iterator[ScanCell]:
        while not self.at_end:
            yield self.cell
            self.advance()

    def failing_cells(self) -> Iterator[ScanCell]:
        """Yield every cell of the grid that fails ``test()``, row-major.

        The mismatch mask is reduced one cell block at a time with numpy, so
        only failing cells reach Python. The cursor position is not used or
        changed.
        """

        if self.x_limit <= 0 or self.y_limit <= 0:
            return
        rows = -(-self.y_limit // self.cell_height)
        cols = -(-self.x_limit // self.cell_width)
        padded = np.zeros((rows * self.cell_height, cols * self.cell_width), dtype=bool)
        padded[: self.y_limit, : self.x_limit] = self._mismatch
        blocks = padded.reshape(rows, self.cell_height, cols, self.cell_width).any(axis=(1, 3))
        for row, col in zip(*np.nonzero(blocks)):
            origin = Point(int(col) * self.cell_width, int(row) * self.cell_height)
            yield ScanCell(origin, self.cell_width, self.cell_height, self.x_limit, self.y_limit)
