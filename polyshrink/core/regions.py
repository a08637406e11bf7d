"""Planar region operations backed by Shapely.

The topology repair pass only needs four boolean operations on regions plus
conversion to and from closed coordinate rings. Keeping them behind this
narrow interface means the rest of the package never touches Shapely
geometry types directly.
"""

from typing import List, Sequence

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

Ring = List[List[float]]


def _clean(region: BaseGeometry) -> BaseGeometry:
    """Fix an invalid region with the buffer(0) trick."""
    if region.is_valid:
        return region
    return region.buffer(0)


def ring_to_region(coordinates: Sequence[Sequence[float]]) -> BaseGeometry:
    """Build a region from one closed (or open) coordinate ring.

    Args:
        coordinates: Ring coordinates as ``[x, y]`` pairs

    Returns:
        Valid Shapely polygonal geometry covering the ring's interior
    """
    return _clean(Polygon(coordinates))


def regions_intersect(a: BaseGeometry, b: BaseGeometry) -> bool:
    """Whether two regions share any point, boundaries included."""
    return a.intersects(b)


def region_contains(outer: BaseGeometry, inner: BaseGeometry) -> bool:
    """Whether ``inner`` lies entirely within ``outer``."""
    return outer.contains(inner)


def region_union(a: BaseGeometry, b: BaseGeometry) -> BaseGeometry:
    """Union of two regions."""
    return _clean(a.union(b))


def region_difference(a: BaseGeometry, b: BaseGeometry) -> BaseGeometry:
    """Part of ``a`` not covered by ``b``."""
    return _clean(a.difference(b))


def region_to_polygons(region: BaseGeometry) -> List[Polygon]:
    """Split a region into its polygon parts, dropping empty and non-areal pieces."""
    if region.is_empty:
        return []
    if isinstance(region, Polygon):
        return [region]
    if isinstance(region, MultiPolygon):
        return [part for part in region.geoms if not part.is_empty]
    if hasattr(region, 'geoms'):
        polygons: List[Polygon] = []
        for part in region.geoms:
            polygons.extend(region_to_polygons(part))
        return polygons
    return []


def polygon_to_rings(polygon: Polygon) -> List[Ring]:
    """Closed ``[x, y]`` rings of a polygon, exterior first."""
    rings = [polygon.exterior] + list(polygon.interiors)
    return [[[x, y] for x, y in ring.coords] for ring in rings]


__all__ = [
    'ring_to_region',
    'regions_intersect',
    'region_contains',
    'region_union',
    'region_difference',
    'region_to_polygons',
    'polygon_to_rings',
]
