"""Closed rings of vertices."""

from typing import List, Optional, Sequence

from ..core.errors import (
    InvalidRestoreOrderError,
    InvalidStateError,
    MinimumRingSizeError,
)
from ..core.geometry_utils import link_endpoints, normalize_point, ring_area, unlink_endpoints
from ..core.intersection import Segment, any_intersection
from .base import Geometry
from .vertex import Vertex

MIN_RING_SIZE = 3


class Ring(Geometry):
    """A closed loop of vertices with in-place removal and restoration.

    The ring owns a fixed arena of :class:`Vertex` records, one per input
    point. Removing a vertex splices it out of the circular linked list and
    leaves ``None`` in its slot; restoring it puts it back. Restoration must
    mirror removal exactly (last removed, first restored), which is checked
    by requiring the vertex's recorded neighbours to still be adjacent.

    Args:
        points: Ring coordinates, closed (first point repeated) or open
        min_vertex_count: Live vertex count below which removal is refused.
            Outer rings keep at least a triangle; holes use 0 so they can
            collapse and disappear from the output.

    Examples:
        >>> ring = Ring([(0, 0), (0, 4), (4, 4), (4, 0), (0, 0)])
        >>> ring.vertex_count
        4
        >>> ring.original_area
        16.0
    """

    def __init__(self, points: Sequence[Sequence[float]], min_vertex_count: int = MIN_RING_SIZE):
        super().__init__()
        points = unlink_endpoints([normalize_point(p) for p in points])

        self._vertices: List[Vertex] = [
            Vertex(point, self, index) for index, point in enumerate(points)
        ]
        self.slots: List[Optional[Vertex]] = list(self._vertices)
        self._vertex_count = len(self._vertices)
        self.min_vertex_count = min_vertex_count

        size = len(self._vertices)
        for index, vertex in enumerate(self._vertices):
            vertex.next = self._vertices[(index + 1) % size]
            vertex.prev = self._vertices[(index - 1) % size]

        self.original_area = ring_area(points)
        self.area_changed = 0.0

    @property
    def vertex_count(self) -> int:
        """Live vertices in the ring."""
        return self._vertex_count

    def __repr__(self) -> str:
        return f"Ring({self.vertex_count}/{len(self._vertices)} vertices)"

    @property
    def geom_type(self) -> str:
        return 'LinearRing'

    def rings(self) -> List['Ring']:
        return [self]

    def vertex_at(self, index: int) -> Vertex:
        """Vertex record for slot ``index``, live or removed."""
        return self._vertices[index]

    def is_live(self, vertex: Vertex) -> bool:
        return vertex.ring is self and self.slots[vertex.index] is vertex

    @property
    def is_at_minimum(self) -> bool:
        """True when no further vertex may be removed from this ring."""
        return self.min_vertex_count > 0 and self.vertex_count <= self.min_vertex_count

    @property
    def relative_area_changed(self) -> float:
        if self.original_area == 0:
            return 0.0 if self.area_changed == 0 else float('inf')
        return self.area_changed / self.original_area

    def remove_vertex(self, vertex: Vertex) -> None:
        """Splice ``vertex`` out of the ring.

        Raises:
            InvalidStateError: If the vertex is not live in this ring
            MinimumRingSizeError: If the ring is already at its minimum size
        """
        if not self.is_live(vertex):
            raise InvalidStateError(f"{vertex!r} is not a live vertex of this ring.")
        if self.is_at_minimum:
            raise MinimumRingSizeError(
                f"Cannot simplify ring below {self.min_vertex_count} vertices."
            )

        area = vertex.get_area()
        prev, nxt = vertex.prev, vertex.next

        self.slots[vertex.index] = None
        self._vertex_count -= 1
        self.area_changed += area

        prev.next = nxt
        nxt.prev = prev

    def restore_vertex(self, vertex: Vertex) -> None:
        """Return a removed ``vertex`` between its recorded neighbours.

        Raises:
            InvalidStateError: If the vertex is already live
            InvalidRestoreOrderError: If its neighbours are no longer adjacent
        """
        if vertex.ring is not self or self.slots[vertex.index] is not None:
            raise InvalidStateError(f"{vertex!r} is not a removed vertex of this ring.")

        prev, nxt = vertex.prev, vertex.next
        if prev.next is not nxt or nxt.prev is not prev:
            raise InvalidRestoreOrderError('Incorrect restoration order.')

        self.slots[vertex.index] = vertex
        self._vertex_count += 1
        self.area_changed -= vertex.get_area()

        prev.next = vertex
        nxt.prev = vertex

    def list_vertices(self) -> List[Vertex]:
        return [vertex for vertex in self.slots if vertex is not None]

    def points(self) -> List[tuple]:
        """Open list of live vertex coordinates in slot order."""
        return [vertex.point for vertex in self.list_vertices()]

    @property
    def area(self) -> float:
        return ring_area(self.points())

    def line_segments(self) -> List[Segment]:
        """Edges from each live vertex to its successor.

        A ring with fewer than three live vertices encloses nothing and is
        left out of the output, so it contributes no segments.
        """
        if self.vertex_count < MIN_RING_SIZE:
            return []
        return [(vertex.point, vertex.next.point) for vertex in self.list_vertices()]

    def has_self_intersections(self) -> bool:
        return any_intersection(self.line_segments())

    def to_coordinates(self) -> List[List[float]]:
        """Closed ``[x, y]`` loop of live vertices, or ``[]`` if degenerate."""
        if self.vertex_count < MIN_RING_SIZE:
            return []
        return [[x, y] for x, y in link_endpoints(self.points())]


__all__ = [
    'MIN_RING_SIZE',
    'Ring',
]
