"""Mutable ring-based geometries used by the simplifier.

These classes hold the vertex graph that simplification edits in place. They
are built from interchange coordinates and turned back into coordinates once
simplification is done; they are not Shapely geometries.
"""

from .base import Geometry, VertexObserver
from .vertex import Vertex
from .ring import MIN_RING_SIZE, Ring
from .polygon import PolygonGeometry, MultiPolygonGeometry

__all__ = [
    'Geometry',
    'VertexObserver',
    'Vertex',
    'MIN_RING_SIZE',
    'Ring',
    'PolygonGeometry',
    'MultiPolygonGeometry',
]
