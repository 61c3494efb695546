"""Boundary edges of failing cells and their grouping into contours."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set

from .scan import ScanCell
from .types import Edge, Point

Contour = List[Edge]


class BoundaryEdgeSet:
    """Symmetric difference of the sides of every added cell.

    A side shared by two added cells is inserted by the first and removed by
    the second, so only the outline of each connected group of cells is left.
    Each surviving edge remembers the origin of the cell that contributed it.
    """

    def __init__(self) -> None:
        self._owners: Dict[Edge, Point] = {}

    def add_rect(self, cell: ScanCell) -> None:
        for edge in cell.edges():
            self.toggle(edge, cell.origin)

    def toggle(self, edge: Edge, owner: Point) -> None:
        if edge in self._owners:
            del self._owners[edge]
        else:
            self._owners[edge] = owner

    def owner(self, edge: Edge) -> Point:
        return self._owners[edge]

    def edges(self) -> List[Edge]:
        return sorted(self._owners)

    def contours(self, *, join_corners: bool = False) -> List[Contour]:
        return extract_contours(self._owners, owners=None if join_corners else self._owners)

    def __contains__(self, edge: object) -> bool:
        return edge in self._owners

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges())

    def __len__(self) -> int:
        return len(self._owners)


def extract_contours(
    edges: Iterable[Edge],
    *,
    owners: Optional[Mapping[Edge, Point]] = None,
) -> List[Contour]:
    """Split ``edges`` into connected components.

    Two edges are connected when they share an endpoint. With ``owners``,
    a point where four edges meet (two cells touching only at a corner)
    connects just the edges contributed by the same cell.

    Components are found with an iterative depth-first search; seeds are
    taken in edge order and each contour lists its edges in visiting order.
    """

    ordered = sorted(set(edges))
    by_point: Dict[Point, List[Edge]] = {}
    for edge in ordered:
        by_point.setdefault(edge.begin, []).append(edge)
        by_point.setdefault(edge.end, []).append(edge)

    def neighbours(edge: Edge) -> Set[Edge]:
        found: Set[Edge] = set()
        for point in (edge.begin, edge.end):
            candidates = by_point[point]
            if owners is not None and len(candidates) > 2:
                candidates = [other for other in candidates if owners[other] == owners[edge]]
            found.update(candidates)
        return found

    visited: Set[Edge] = set()
    contours: List[Contour] = []
    for seed in ordered:
        if seed in visited:
            continue
        contour: Contour = []
        stack = [seed]
        while stack:
            edge = stack.pop()
            if edge in visited:
                continue
            visited.add(edge)
            contour.append(edge)
            stack.extend(sorted(other for other in neighbours(edge) if other not in visited))
        contours.append(contour)
    return contours
