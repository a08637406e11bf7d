"""Shared interface for simplifiable geometries.

Rings, polygons and multi-polygons expose the same small capability set so
that a single :class:`~polyshrink.simplifier.Simplifier` can drive any of
them. Vertex changes travel upward through ``on_vertex_changed``: a ring
forwards them to its polygon, the polygon to its multi-polygon, and the
outermost geometry to whatever observers registered on it.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Protocol

from ..core.intersection import Segment, any_intersection

if TYPE_CHECKING:
    from .ring import Ring
    from .vertex import Vertex


class VertexObserver(Protocol):
    """Anything that wants to hear about vertices whose neighbours changed."""

    def on_vertex_changed(self, vertex: 'Vertex') -> None:
        ...


class Geometry(ABC):
    """Abstract base class for ring-based geometries."""

    def __init__(self):
        self._observers: List[VertexObserver] = []

    def add_observer(self, observer: VertexObserver) -> None:
        """Register ``observer`` for vertex change notifications."""
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: VertexObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def on_vertex_changed(self, vertex: 'Vertex') -> None:
        """Forward a vertex change to every registered observer."""
        for observer in self._observers:
            observer.on_vertex_changed(vertex)

    @property
    @abstractmethod
    def geom_type(self) -> str:
        """Interchange type name ('LinearRing', 'Polygon' or 'MultiPolygon')."""

    @abstractmethod
    def rings(self) -> List['Ring']:
        """All rings of the geometry, outer rings before their holes."""

    @property
    @abstractmethod
    def area(self) -> float:
        """Current planar area, holes subtracted."""

    @abstractmethod
    def to_coordinates(self) -> list:
        """Live vertices as closed interchange coordinates, degenerate rings dropped."""

    def list_vertices(self) -> List['Vertex']:
        """All live vertices, ring by ring in slot order."""
        vertices: List['Vertex'] = []
        for ring in self.rings():
            vertices.extend(ring.list_vertices())
        return vertices

    def line_segments(self) -> List[Segment]:
        """Edges between live vertices of every non-degenerate ring."""
        segments: List[Segment] = []
        for ring in self.rings():
            segments.extend(ring.line_segments())
        return segments

    @property
    def vertex_count(self) -> int:
        return sum(ring.vertex_count for ring in self.rings())

    def has_intersections(self) -> bool:
        """Whether any two edges of the geometry intersect."""
        return any_intersection(self.line_segments())

    def to_geojson(self) -> dict:
        """Interchange dict ``{'type': ..., 'coordinates': ...}``."""
        return {'type': self.geom_type, 'coordinates': self.to_coordinates()}


__all__ = [
    'Geometry',
    'VertexObserver',
]
