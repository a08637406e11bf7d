"""Line segment intersection predicates.

Segments are pairs of points ``((x1, y1), (x2, y2))``. Two segments that
share an endpoint never count as intersecting: adjacent edges of a ring always
share one, and that is the expected shape of a ring, not a defect.
"""

from itertools import combinations
from typing import Iterable, Sequence, Tuple

from .geometry_utils import Point

Segment = Tuple[Point, Point]


def _orientation(a: Point, b: Point, c: Point) -> int:
    """Sign of the cross product ``(b - a) x (c - a)``."""
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if cross > 0:
        return 1
    if cross < 0:
        return -1
    return 0


def _on_segment(a: Point, b: Point, p: Point) -> bool:
    """Whether ``p``, known to be collinear with ``ab``, lies within its bounds."""
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def shares_endpoint(a: Segment, b: Segment) -> bool:
    """Whether two segments have an endpoint in common."""
    return a[0] == b[0] or a[0] == b[1] or a[1] == b[0] or a[1] == b[1]


def intersects(a: Segment, b: Segment) -> bool:
    """Test whether two segments meet anywhere other than a shared endpoint.

    Segments sharing an endpoint return False immediately. Otherwise the test
    uses exact orientation signs: a proper crossing, a collinear overlap, or
    an endpoint of one segment touching the interior of the other all count
    as an intersection.

    Args:
        a: First segment
        b: Second segment

    Returns:
        True if the segments intersect

    Examples:
        >>> intersects(((0, 0), (4, 4)), ((0, 4), (4, 0)))
        True
        >>> intersects(((0, 0), (4, 0)), ((0, 0), (4, 4)))
        False
    """
    if shares_endpoint(a, b):
        return False

    p1, p2 = a
    q1, q2 = b
    o1 = _orientation(p1, p2, q1)
    o2 = _orientation(p1, p2, q2)
    o3 = _orientation(q1, q2, p1)
    o4 = _orientation(q1, q2, p2)

    if o1 != o2 and o3 != o4 and 0 not in (o1, o2, o3, o4):
        return True

    # Touching and collinear configurations
    if o1 == 0 and _on_segment(p1, p2, q1):
        return True
    if o2 == 0 and _on_segment(p1, p2, q2):
        return True
    if o3 == 0 and _on_segment(q1, q2, p1):
        return True
    if o4 == 0 and _on_segment(q1, q2, p2):
        return True
    return False


def intersects_any(segment: Segment, segments: Iterable[Segment]) -> bool:
    """Whether ``segment`` intersects at least one of ``segments``."""
    return any(intersects(segment, other) for other in segments)


def any_intersection(segments: Sequence[Segment]) -> bool:
    """Whether any two segments in the collection intersect.

    Checks every pairwise combination and stops at the first hit.
    """
    for first, second in combinations(segments, 2):
        if intersects(first, second):
            return True
    return False


__all__ = [
    'Segment',
    'shares_endpoint',
    'intersects',
    'intersects_any',
    'any_intersection',
]
