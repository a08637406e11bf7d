"""Polygon simplification entry points.

This module provides the high-level functions for simplifying polygonal
geometries. ``simplify_polygon`` works on interchange dicts
(``{'type': 'Polygon', 'coordinates': [...]}``), ``simplify_geometry`` on
Shapely geometries, and ``reduce_vertices`` on a single coordinate ring.
"""

import logging
import warnings
from typing import List, Optional, Sequence, Union

from shapely.geometry import MultiPolygon, Polygon, mapping, shape
from shapely.geometry.base import BaseGeometry

from .config import (
    DEFAULT_MAX_ERROR,
    DEFAULT_MAX_VERTICES,
    DEFAULT_MIN_VERTICES,
    SimplifyConfig,
)
from .core.errors import ExhaustedError, InvalidArgumentError, SimplificationWarning
from .core.geometry_utils import normalize_point, unlink_endpoints
from .core.types import GeometryType
from .geometry import MultiPolygonGeometry, PolygonGeometry, Ring
from .simplifier import Simplifier
from .topology import fix_self_intersections

logger = logging.getLogger(__name__)


def count_vertices(geojson: dict) -> int:
    """Number of distinct vertices in a Polygon or MultiPolygon.

    Closing points are not counted.

    Raises:
        InvalidArgumentError: If the geometry type is not supported

    Examples:
        >>> count_vertices({'type': 'Polygon', 'coordinates': [[[0, 0], [0, 1], [1, 1], [0, 0]]]})
        3
    """
    geom_type = GeometryType.parse(geojson.get('type'))
    coordinates = geojson.get('coordinates') or []
    if geom_type == GeometryType.POLYGON:
        coordinates = [coordinates]

    return sum(
        len(unlink_endpoints([normalize_point(p) for p in ring]))
        for polygon in coordinates
        for ring in polygon
    )


def create_geometry(geojson: dict) -> Union[PolygonGeometry, MultiPolygonGeometry]:
    """Build the mutable simplification geometry for an interchange dict.

    Raises:
        InvalidArgumentError: If the geometry type is not supported or the
            coordinates are malformed
    """
    geom_type = GeometryType.parse(geojson.get('type'))
    coordinates = geojson.get('coordinates')
    if not coordinates:
        raise InvalidArgumentError(f"{geom_type.value} has no coordinates")

    if geom_type == GeometryType.POLYGON:
        return PolygonGeometry(coordinates)
    if any(not polygon for polygon in coordinates):
        raise InvalidArgumentError('MultiPolygon contains an empty polygon')
    return MultiPolygonGeometry(coordinates)


def _closed_copy(geojson: dict) -> dict:
    geometry = create_geometry(geojson)
    return geometry.to_geojson()


def simplify_polygon(
    geojson: dict,
    max_vertices: int = DEFAULT_MAX_VERTICES,
    min_vertices: int = DEFAULT_MIN_VERTICES,
    max_error: float = DEFAULT_MAX_ERROR,
    fix_intersections: bool = False,
    max_repair_iterations: Optional[int] = None,
) -> dict:
    """Simplify a Polygon or MultiPolygon by removing least-area vertices.

    Vertices are removed smallest triangle area first until the result has
    at most ``max_vertices`` vertices, and then further while it has more
    than ``min_vertices`` and the relative area change stays below
    ``max_error``. A removal that pushes the error over budget is undone
    unless that would break ``max_vertices``.

    Args:
        geojson: ``{'type': 'Polygon' | 'MultiPolygon', 'coordinates': ...}``
            with closed or open rings. Not modified.
        max_vertices: Result will not have more vertices than this, regardless
            of other options (default: 200, must be at least 3)
        min_vertices: Result will not have fewer vertices than this, unless
            it is larger than max_vertices (default: 30)
        max_error: Result's area change relative to the original area will
            not exceed this, unless reduction to max_vertices causes it to
            (default: 0.05, between 0 and 1)
        fix_intersections: If True, self-intersections introduced by
            simplification are removed by skipping the offending vertices,
            and overlapping rings are merged afterwards (default: False)
        max_repair_iterations: Optional cap on intersection repair rounds

    Returns:
        New interchange dict with closed rings

    Raises:
        InvalidArgumentError: For out-of-contract options, unsupported types,
            or (with fix_intersections) an input that already self-intersects

    Examples:
        >>> result = simplify_polygon(
        ...     {'type': 'Polygon', 'coordinates': [[[0, 0], [0, 10], [9, 9], [10, 10], [10, 0], [0, 0]]]},
        ...     max_vertices=4,
        ... )
        >>> result['coordinates']
        [[[0.0, 0.0], [0.0, 10.0], [10.0, 10.0], [10.0, 0.0], [0.0, 0.0]]]
    """
    config = SimplifyConfig(
        max_vertices=max_vertices,
        min_vertices=min_vertices,
        max_error=max_error,
        fix_intersections=fix_intersections,
        max_repair_iterations=max_repair_iterations,
    )
    config.validate()
    return _simplify_with_config(geojson, config)


def _simplify_with_config(geojson: dict, config: SimplifyConfig) -> dict:
    vertex_count = count_vertices(geojson)
    if vertex_count <= config.min_vertices and vertex_count <= config.max_vertices:
        # Already at or below both bounds
        return _closed_copy(geojson)

    geometry = create_geometry(geojson)
    if config.fix_intersections and geometry.has_intersections():
        raise InvalidArgumentError(
            'Geometry intersects itself before simplification; cannot fix intersections'
        )

    simplifier = Simplifier(geometry)
    options = config.simplify_options()

    try:
        simplifier.simplify_to(**options)
    except ExhaustedError as exc:
        warnings.warn(
            f"Could not reduce geometry to {config.max_vertices} vertices: {exc}",
            SimplificationWarning,
            stacklevel=3,
        )

    if config.fix_intersections:
        skipped = simplifier.repair_intersections(
            max_iterations=config.max_repair_iterations, **options
        )
        logger.debug("Intersection repair skipped %d vertices", skipped)

    result = geometry.to_geojson()
    logger.debug(
        "Simplified %s from %d to %d vertices (area change %.4f)",
        result['type'], vertex_count, simplifier.vertex_count,
        simplifier.relative_area_changed,
    )

    if config.fix_intersections:
        result = fix_self_intersections(result)
    return result


def simplify_geometry(
    geometry: BaseGeometry,
    max_vertices: int = DEFAULT_MAX_VERTICES,
    min_vertices: int = DEFAULT_MIN_VERTICES,
    max_error: float = DEFAULT_MAX_ERROR,
    fix_intersections: bool = False,
    max_repair_iterations: Optional[int] = None,
) -> BaseGeometry:
    """Simplify a Shapely Polygon or MultiPolygon.

    Same options as :func:`simplify_polygon`.

    Args:
        geometry: Shapely Polygon or MultiPolygon (2D)

    Returns:
        New Shapely Polygon or MultiPolygon

    Raises:
        InvalidArgumentError: If the geometry is not a non-empty 2D Polygon
            or MultiPolygon, or an option is out of contract

    Examples:
        >>> poly = Polygon([(0, 0), (0, 10), (9, 9), (10, 10), (10, 0)])
        >>> len(simplify_geometry(poly, max_vertices=4).exterior.coords)
        5
    """
    if not isinstance(geometry, (Polygon, MultiPolygon)):
        raise InvalidArgumentError(
            f"Input geometry must be a Polygon or MultiPolygon, got {geometry.geom_type}"
        )
    if geometry.is_empty:
        raise InvalidArgumentError('Input geometry is empty')
    if geometry.has_z:
        raise InvalidArgumentError('Only 2D geometries can be simplified')

    result = simplify_polygon(
        mapping(geometry),
        max_vertices=max_vertices,
        min_vertices=min_vertices,
        max_error=max_error,
        fix_intersections=fix_intersections,
        max_repair_iterations=max_repair_iterations,
    )
    return shape(result)


def reduce_vertices(
    points: Sequence[Sequence[float]],
    max_vertices: Optional[int] = None,
    max_error: Optional[float] = None,
) -> List[List[float]]:
    """Reduce a single coordinate ring by least-area elimination.

    Args:
        points: Ring coordinates, closed or open
        max_vertices: Result will not have more vertices than this (at least 3)
        max_error: Largest allowed area change relative to the ring's area

    Returns:
        Remaining points as an open list, in their original order

    Raises:
        InvalidArgumentError: If neither condition is given or one is out of
            contract

    Examples:
        >>> reduce_vertices([[0, 0], [0, 10], [9, 9], [10, 10], [10, 0]], max_vertices=4)
        [[0.0, 0.0], [0.0, 10.0], [10.0, 10.0], [10.0, 0.0]]
    """
    if max_vertices is None and max_error is None:
        raise InvalidArgumentError('A simplification condition must be given')
    if max_vertices is not None and max_vertices < 3:
        raise InvalidArgumentError('max_vertices must be at least 3')
    if max_error is not None and not 0 <= max_error <= 1:
        raise InvalidArgumentError('max_error must be between 0 and 1')

    ring = Ring(points)
    simplifier = Simplifier(ring)
    try:
        simplifier.simplify_to(max_vertices=max_vertices, max_error=max_error)
    except ExhaustedError:
        logger.debug("Ring reduced to its minimum size")
    return [[x, y] for x, y in ring.points()]


__all__ = [
    'count_vertices',
    'create_geometry',
    'simplify_polygon',
    'simplify_geometry',
    'reduce_vertices',
]
