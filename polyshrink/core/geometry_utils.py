"""Common coordinate and area utilities.

This module provides the small numeric helpers shared by rings, polygons and
the public API: opening and closing coordinate rings, normalizing points, and
computing planar areas.
"""

import math
from typing import List, Sequence, Tuple

import numpy as np

from .errors import InvalidArgumentError

Point = Tuple[float, float]


def normalize_point(point: Sequence[float]) -> Point:
    """Convert a coordinate pair into a ``(x, y)`` tuple of floats.

    Args:
        point: Sequence holding exactly two finite numbers

    Returns:
        Tuple ``(x, y)``

    Raises:
        InvalidArgumentError: If the point does not hold two finite numbers

    Examples:
        >>> normalize_point([1, 2])
        (1.0, 2.0)
    """
    if len(point) != 2:
        raise InvalidArgumentError(
            f"Points must be [x, y] pairs, got {len(point)} ordinates"
        )
    x, y = float(point[0]), float(point[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidArgumentError(f"Point coordinates must be finite: {point!r}")
    return (x, y)


def link_endpoints(points: List[Point]) -> List[Point]:
    """Close a coordinate ring by repeating its first point at the end.

    A ring that is already closed is returned unchanged. A single point is
    treated as an open ring.

    Args:
        points: Ordered ring coordinates

    Returns:
        Closed list of coordinates (first point equals last point)

    Examples:
        >>> link_endpoints([(0, 0), (0, 1), (1, 1)])
        [(0, 0), (0, 1), (1, 1), (0, 0)]
    """
    if not points:
        return list(points)
    if len(points) == 1 or points[0] != points[-1]:
        return list(points) + [points[0]]
    return list(points)


def unlink_endpoints(points: List[Point]) -> List[Point]:
    """Open a coordinate ring by dropping a duplicate closing point.

    Args:
        points: Ordered ring coordinates, closed or open

    Returns:
        Open list of coordinates

    Examples:
        >>> unlink_endpoints([(0, 0), (0, 1), (1, 1), (0, 0)])
        [(0, 0), (0, 1), (1, 1)]
    """
    if len(points) > 1 and points[0] == points[-1]:
        return list(points[:-1])
    return list(points)


def ring_area(points: Sequence[Point]) -> float:
    """Planar area enclosed by an open coordinate ring (shoelace formula).

    Args:
        points: Open ring coordinates

    Returns:
        Absolute enclosed area, 0.0 for fewer than 3 points
    """
    if len(points) < 3:
        return 0.0
    coords = np.asarray(points, dtype=float)
    x = coords[:, 0]
    y = coords[:, 1]
    return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2.0)


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Area of the triangle ``abc``.

    Examples:
        >>> triangle_area((0, 0), (4, 0), (0, 4))
        8.0
    """
    return abs(
        a[0] * (b[1] - c[1]) + b[0] * (c[1] - a[1]) + c[0] * (a[1] - b[1])
    ) / 2.0


__all__ = [
    'Point',
    'normalize_point',
    'link_endpoints',
    'unlink_endpoints',
    'ring_area',
    'triangle_area',
]
