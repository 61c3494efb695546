from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Point:
    x: int = 0
    y: int = 0


@dataclass(frozen=True, order=True)
class Edge:
    """Segment between two cell corners.

    The endpoints are stored with ``begin < end`` so an edge and its reverse
    are the same value.
    """

    begin: Point
    end: Point

    def __post_init__(self) -> None:
        if self.begin == self.end:
            raise ValueError(f"Degenerate edge at {self.begin}")
        if self.end < self.begin:
            begin, end = self.end, self.begin
            object.__setattr__(self, "begin", begin)
            object.__setattr__(self, "end", end)


@dataclass(frozen=True)
class Color:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channels must be in 0..255, got {self.to_tuple()}")

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.to_tuple())


RED = Color(255, 0, 0)
BLACK = Color()
