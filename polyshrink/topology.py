"""Whole-geometry topology repair.

Simplifying each ring on its own can leave rings overlapping each other: two
polygons of a multi-polygon may now overlap, two holes may overlap, or a hole
may cross the boundary of its polygon. Skipping vertices cannot fix these, so
after simplification the rings are merged with planar region operations:

1. Overlapping outer rings are replaced by their union; the merged polygon
   inherits the holes of both.
2. Overlapping holes of the same polygon are replaced by their union.
3. A hole outside its outer ring is dropped; a hole crossing the outer ring
   is cut out of the outer ring and dropped.

Each step runs until nothing changes.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from shapely.geometry.base import BaseGeometry
from shapely.strtree import STRtree

from .core.regions import (
    polygon_to_rings,
    region_contains,
    region_difference,
    region_to_polygons,
    region_union,
    regions_intersect,
    ring_to_region,
)
from .core.types import GeometryType

logger = logging.getLogger(__name__)


@dataclass
class PolygonRegions:
    """An outer region and the hole regions cut out of it."""

    outer: BaseGeometry
    holes: List[BaseGeometry] = field(default_factory=list)


def _read_polygons(geojson: dict) -> List[PolygonRegions]:
    geom_type = GeometryType.parse(geojson['type'])
    coordinates = geojson['coordinates']
    if geom_type == GeometryType.POLYGON:
        coordinates = [coordinates]

    return [
        PolygonRegions(
            outer=ring_to_region(polygon[0]),
            holes=[ring_to_region(ring) for ring in polygon[1:]],
        )
        for polygon in coordinates
        if polygon
    ]


def _first_intersecting_pair(regions: List[BaseGeometry]) -> Optional[Tuple[int, int]]:
    """Lowest index pair ``(i, j)``, ``i < j``, of intersecting regions."""
    if len(regions) < 2:
        return None

    tree = STRtree(regions)
    for i, region in enumerate(regions):
        candidates = sorted(int(j) for j in tree.query(region, predicate='intersects'))
        for j in candidates:
            if j > i and regions_intersect(region, regions[j]):
                return i, j
    return None


def _merge_outer_rings(polygons: List[PolygonRegions]) -> bool:
    changed = False
    while True:
        pair = _first_intersecting_pair([polygon.outer for polygon in polygons])
        if pair is None:
            return changed
        i, j = pair
        first, second = polygons[i], polygons[j]
        first.outer = region_union(first.outer, second.outer)
        first.holes = first.holes + second.holes
        del polygons[j]
        changed = True
        logger.debug("Merged outer rings %d and %d", i, j)


def _merge_holes(polygon: PolygonRegions) -> bool:
    changed = False
    while True:
        pair = _first_intersecting_pair(polygon.holes)
        if pair is None:
            return changed
        i, j = pair
        polygon.holes[i] = region_union(polygon.holes[i], polygon.holes[j])
        del polygon.holes[j]
        changed = True
        logger.debug("Merged holes %d and %d", i, j)


def _clip_holes(polygon: PolygonRegions) -> bool:
    changed = False
    index = 0
    while index < len(polygon.holes):
        hole = polygon.holes[index]
        if not regions_intersect(polygon.outer, hole):
            # Hole lies outside its polygon
            del polygon.holes[index]
            changed = True
        elif not region_contains(polygon.outer, hole):
            # Hole crosses the outer boundary; carve it out of the outer ring
            polygon.outer = region_difference(polygon.outer, hole)
            del polygon.holes[index]
            changed = True
            index = 0
        else:
            index += 1
    return changed


def _write_polygons(polygons: List[PolygonRegions]) -> List[list]:
    output = []
    for polygon in polygons:
        parts = region_to_polygons(polygon.outer)
        unassigned = list(polygon.holes)
        for part in parts:
            rings = polygon_to_rings(part)
            remaining = []
            for hole in unassigned:
                if region_contains(part, hole) or regions_intersect(part, hole):
                    rings.extend(
                        polygon_to_rings(hole_part)[0]
                        for hole_part in region_to_polygons(hole)
                    )
                else:
                    remaining.append(hole)
            unassigned = remaining
            output.append(rings)
    return output


def fix_self_intersections(geojson: dict) -> dict:
    """Merge overlapping rings of a Polygon or MultiPolygon.

    Fixes intersections between outer rings and holes rather than within a
    single ring; ring self-intersections are handled by
    :meth:`Simplifier.repair_intersections`.

    Args:
        geojson: ``{'type': 'Polygon' | 'MultiPolygon', 'coordinates': ...}``

    Returns:
        The input object itself if nothing had to change, otherwise a new
        dict: a Polygon when exactly one polygon remains, else a MultiPolygon.

    Raises:
        InvalidArgumentError: If the geometry type is not supported

    Examples:
        >>> big = [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]
        >>> small = [[5, 5], [5, 6], [6, 6], [6, 5], [5, 5]]
        >>> fix_self_intersections({'type': 'MultiPolygon', 'coordinates': [[small], [big]]})['type']
        'Polygon'
    """
    polygons = _read_polygons(geojson)

    changed = _merge_outer_rings(polygons)
    for polygon in polygons:
        changed = _merge_holes(polygon) or changed
    for polygon in polygons:
        changed = _clip_holes(polygon) or changed

    if not changed:
        return geojson

    coordinates = _write_polygons(polygons)
    if len(coordinates) == 1:
        return {'type': GeometryType.POLYGON.value, 'coordinates': coordinates[0]}
    return {'type': GeometryType.MULTIPOLYGON.value, 'coordinates': coordinates}


__all__ = [
    'PolygonRegions',
    'fix_self_intersections',
]
