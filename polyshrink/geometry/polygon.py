"""Polygon and multi-polygon compositions of rings."""

from typing import List, Sequence

from .base import Geometry
from .ring import MIN_RING_SIZE, Ring


class PolygonGeometry(Geometry):
    """An outer ring plus zero or more holes.

    The outer ring never drops below a triangle. Holes may collapse entirely;
    a hole left with fewer than three vertices is dropped from the output.

    Args:
        coordinates: List of rings, outer ring first, as in the ``coordinates``
            of an interchange Polygon

    Examples:
        >>> polygon = PolygonGeometry([
        ...     [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]],
        ...     [[2, 2], [2, 4], [4, 4], [4, 2], [2, 2]],
        ... ])
        >>> polygon.area
        96.0
    """

    def __init__(self, coordinates: Sequence[Sequence[Sequence[float]]]):
        super().__init__()
        self.outer = Ring(coordinates[0], min_vertex_count=MIN_RING_SIZE)
        self.holes = [Ring(ring, min_vertex_count=0) for ring in coordinates[1:]]

        for ring in self.rings():
            ring.add_observer(self)

    def __repr__(self) -> str:
        return f"PolygonGeometry({self.vertex_count} vertices, {len(self.holes)} holes)"

    @property
    def geom_type(self) -> str:
        return 'Polygon'

    def rings(self) -> List[Ring]:
        return [self.outer] + self.holes

    @property
    def area(self) -> float:
        return self.outer.area - sum(hole.area for hole in self.holes)

    def to_coordinates(self) -> list:
        outer = self.outer.to_coordinates()
        if not outer:
            return []
        holes = [hole.to_coordinates() for hole in self.holes]
        return [outer] + [hole for hole in holes if hole]


class MultiPolygonGeometry(Geometry):
    """An ordered collection of :class:`PolygonGeometry`.

    Args:
        coordinates: List of polygon coordinate lists, as in the
            ``coordinates`` of an interchange MultiPolygon
    """

    def __init__(self, coordinates: Sequence[Sequence[Sequence[Sequence[float]]]]):
        super().__init__()
        self.polygons = [PolygonGeometry(polygon) for polygon in coordinates]

        for polygon in self.polygons:
            polygon.add_observer(self)

    def __repr__(self) -> str:
        return f"MultiPolygonGeometry({len(self.polygons)} polygons, {self.vertex_count} vertices)"

    @property
    def geom_type(self) -> str:
        return 'MultiPolygon'

    def rings(self) -> List[Ring]:
        rings: List[Ring] = []
        for polygon in self.polygons:
            rings.extend(polygon.rings())
        return rings

    @property
    def area(self) -> float:
        return sum(polygon.area for polygon in self.polygons)

    def to_coordinates(self) -> list:
        polygons = [polygon.to_coordinates() for polygon in self.polygons]
        return [polygon for polygon in polygons if polygon]


__all__ = [
    'PolygonGeometry',
    'MultiPolygonGeometry',
]
