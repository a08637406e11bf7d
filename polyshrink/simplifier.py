"""Least-area vertex elimination with undo and intersection rewind.

:class:`Simplifier` drives a Visvalingam-Whyatt style simplification over any
:class:`~polyshrink.geometry.Geometry`. Vertices sit in a min-heap keyed by
the area of the triangle they form with their neighbours; each
:meth:`Simplifier.simplify` call removes the cheapest one and records it in a
history stack so it can be undone. Checking a geometry for self-intersection
is quadratic in its edge count, so instead of testing after every removal the
simplifier runs freely and, when the result intersects, bisects its history
to find the removal that introduced the crossing.
"""

import logging
import warnings
from typing import List, Optional

from .core.errors import (
    ExhaustedError,
    HistoryEmptyError,
    InvalidRestoreOrderError,
    MinimumRingSizeError,
    NoIntersectionFoundError,
    PolyshrinkError,
    RepairWarning,
)
from .core.heap import IndexedHeap
from .core.intersection import any_intersection, intersects_any
from .geometry import Geometry, Ring, Vertex

logger = logging.getLogger(__name__)


def _area_key(vertex: Vertex):
    return (vertex.get_area(), vertex.uid)


class SimplificationHistory:
    """Stack of removed vertices, most recent last.

    Vertices can only be restored in reverse removal order, so the history
    only offers stack operations.
    """

    def __init__(self):
        self._vertices: List[Vertex] = []

    def __len__(self) -> int:
        return len(self._vertices)

    def __bool__(self) -> bool:
        return bool(self._vertices)

    def push(self, vertex: Vertex) -> None:
        self._vertices.append(vertex)

    def pop(self) -> Vertex:
        """Remove and return the most recently removed vertex.

        Raises:
            HistoryEmptyError: If nothing has been recorded
        """
        if not self._vertices:
            raise HistoryEmptyError('Simplification history is empty.')
        return self._vertices.pop()

    def peek(self) -> Optional[Vertex]:
        return self._vertices[-1] if self._vertices else None

    def clear(self) -> None:
        self._vertices = []


class Simplifier:
    """Simplifies a geometry in place by removing least-area vertices.

    Args:
        geometry: Geometry to simplify. The simplifier registers itself as an
            observer so neighbour changes re-key the heap.

    Attributes:
        geometry: The geometry being simplified
        heap: Live, non-skipped vertices ordered by ``(area, uid)``
        history: Removed vertices since the last :meth:`clear_history`
        vertex_count: Live vertices in the geometry
        original_area: Geometry area when the simplifier was created
        area_changed: Sum of triangle areas removed so far

    Examples:
        >>> from polyshrink.geometry import PolygonGeometry
        >>> polygon = PolygonGeometry([[[0, 0], [0, 10], [9, 9], [10, 10], [10, 0]]])
        >>> simplifier = Simplifier(polygon)
        >>> simplifier.simplify_to(max_vertices=4)
        >>> polygon.to_coordinates()
        [[[0.0, 0.0], [0.0, 10.0], [10.0, 10.0], [10.0, 0.0], [0.0, 0.0]]]
    """

    def __init__(self, geometry: Geometry):
        self.geometry = geometry

        self.heap: IndexedHeap[Vertex] = IndexedHeap(key=_area_key)
        vertices = geometry.list_vertices()
        for vertex in vertices:
            if not vertex.skipped and not vertex.ring.is_at_minimum:
                self.heap.push(vertex)

        geometry.add_observer(self)

        self.history = SimplificationHistory()

        self.vertex_count = len(vertices)
        self.original_area = geometry.area
        self.area_changed = 0.0

    def on_vertex_changed(self, vertex: Vertex) -> None:
        """Re-key a vertex whose neighbours changed."""
        if not vertex.skipped:
            self.heap.update(vertex)

    @property
    def relative_area_changed(self) -> float:
        """Area removed so far as a fraction of the original area."""
        if self.original_area == 0:
            return 0.0 if self.area_changed == 0 else float('inf')
        return self.area_changed / self.original_area

    def simplify(self) -> Vertex:
        """Remove the vertex with the smallest area.

        Returns:
            The removed vertex

        Raises:
            ExhaustedError: If no removable vertex remains
            MinimumRingSizeError: If the remaining vertices all belong to
                rings already at their minimum size
        """
        if not self.heap:
            raise self._exhausted()

        vertex = self.heap.pop()
        ring = vertex.ring
        try:
            vertex.remove()
        except PolyshrinkError:
            self.heap.push(vertex)
            raise

        self.history.push(vertex)
        self.vertex_count -= 1
        self.area_changed += vertex.get_area()

        if ring.is_at_minimum:
            self._withdraw(ring)
        return vertex

    def undo(self) -> Vertex:
        """Restore the most recently removed vertex.

        Returns:
            The restored vertex

        Raises:
            HistoryEmptyError: If there is nothing to undo
            InvalidRestoreOrderError: If the ring changed since the removal
        """
        vertex = self.history.pop()
        ring = vertex.ring
        was_at_minimum = ring.is_at_minimum
        try:
            vertex.restore()
        except InvalidRestoreOrderError:
            self.history.push(vertex)
            raise

        if was_at_minimum:
            self._offer(ring)
        else:
            self.heap.push(vertex)

        self.vertex_count += 1
        self.area_changed -= vertex.get_area()
        return vertex

    def skip(self) -> Vertex:
        """Permanently exclude the smallest-area vertex from removal.

        The vertex stays in its ring. Skipping is not recorded in history and
        cannot be undone.

        Returns:
            The skipped vertex

        Raises:
            ExhaustedError: If no removable vertex remains
        """
        if not self.heap:
            raise self._exhausted()

        vertex = self.heap.pop()
        vertex.skipped = True
        return vertex

    def clear_history(self) -> None:
        self.history.clear()

    def simplify_to(
        self,
        max_vertices: Optional[int] = None,
        min_vertices: Optional[int] = None,
        max_error: Optional[float] = None,
    ) -> None:
        """Simplify until the geometry reaches the state described by the options.

        With no options this does nothing.

        Args:
            max_vertices: Result never has more vertices than this, whatever
                the other options say.
            min_vertices: Result does not have fewer vertices than this,
                unless ``max_vertices`` is lower.
            max_error: Result's ``relative_area_changed`` does not exceed
                this, unless reaching ``max_vertices`` forces it to.

        Raises:
            ExhaustedError: If the options ask for more removals than the
                geometry allows
        """
        has_max_vertices = max_vertices is not None
        has_min_vertices = min_vertices is not None
        has_max_error = max_error is not None
        has_lower_bound = has_min_vertices or has_max_error

        def exceeds_max_vertices() -> bool:
            return has_max_vertices and self.vertex_count > max_vertices

        def above_lower_bound() -> bool:
            return (
                has_lower_bound
                and (not has_min_vertices or self.vertex_count > min_vertices)
                and (not has_max_error or self.relative_area_changed < max_error)
            )

        removed = 0
        while exceeds_max_vertices() or above_lower_bound():
            self.simplify()
            removed += 1

        max_error_exceeded = has_max_error and self.relative_area_changed > max_error
        below_max_vertices = not has_max_vertices or self.vertex_count < max_vertices
        if max_error_exceeded and below_max_vertices and removed:
            # The last removal overshot the error budget and undoing it keeps
            # the geometry within max_vertices.
            self.undo()

    def has_intersections(self) -> bool:
        """Whether any two edges of the geometry currently intersect."""
        return any_intersection(self.geometry.line_segments())

    def will_intersect(self) -> bool:
        """Whether the next :meth:`simplify` call would create an intersection.

        Raises:
            ExhaustedError: If no removable vertex remains
        """
        if not self.heap:
            raise self._exhausted()

        vertex = self.heap.peek()
        new_segment = (vertex.prev.point, vertex.next.point)
        return intersects_any(new_segment, self.geometry.line_segments())

    def rewind_to_intersection(self) -> None:
        """Revert to just before the first removal that caused an intersection.

        Bisects over the history: while the geometry intersects, half of the
        remaining history is undone; once it is clean and the next removal
        would not intersect either, half of the distance back to the last
        known intersecting state is replayed. The search ends in a clean state
        whose next removal is the one that introduced the intersection.
        History is cleared afterwards.

        Raises:
            NoIntersectionFoundError: If the geometry intersects with no
                history left to undo, or no removal in the searched range
                introduced an intersection
        """
        min_vertex_count = self.vertex_count

        while True:
            if self.has_intersections():
                if not self.history:
                    raise NoIntersectionFoundError(
                        'Geometry intersects before any recorded simplification.'
                    )
                min_vertex_count = self.vertex_count
                target_length = len(self.history) // 2
                while len(self.history) > target_length:
                    self.undo()
            elif self.heap and self.will_intersect():
                break
            else:
                self.clear_history()
                forward_range = self.vertex_count - min_vertex_count
                if forward_range <= 0:
                    raise NoIntersectionFoundError('First intersection could not be found.')
                target_length = (forward_range + 1) // 2
                while len(self.history) < target_length:
                    self.simplify()

        self.clear_history()

    def repair_intersections(
        self,
        max_vertices: Optional[int] = None,
        min_vertices: Optional[int] = None,
        max_error: Optional[float] = None,
        max_iterations: Optional[int] = None,
    ) -> int:
        """Remove intersections introduced by simplification.

        While the geometry intersects: rewind to the first intersection, skip
        the vertex whose removal caused it, and simplify again with the same
        options. Each round skips one vertex, so the loop always ends.

        Args:
            max_vertices: As for :meth:`simplify_to`
            min_vertices: As for :meth:`simplify_to`
            max_error: As for :meth:`simplify_to`
            max_iterations: Optional cap on the number of rounds

        Returns:
            Number of vertices skipped

        Raises:
            NoIntersectionFoundError: If an intersection was not introduced by
                this simplifier (for example, the input already intersected)
        """
        skipped = 0
        while self.has_intersections():
            if max_iterations is not None and skipped >= max_iterations:
                warnings.warn(
                    f"Intersection repair stopped after {skipped} rounds; "
                    "geometry still intersects",
                    RepairWarning,
                    stacklevel=2,
                )
                break

            try:
                self.rewind_to_intersection()
                vertex = self.skip()
            except ExhaustedError as exc:
                warnings.warn(
                    f"Intersection repair ran out of vertices: {exc}",
                    RepairWarning,
                    stacklevel=2,
                )
                break

            skipped += 1
            logger.debug("Skipped %r (round %d, %d vertices)", vertex, skipped, self.vertex_count)

            try:
                self.simplify_to(max_vertices, min_vertices, max_error)
            except ExhaustedError:
                logger.debug("No removable vertices left after skipping %r", vertex)

        return skipped

    def _withdraw(self, ring: Ring) -> None:
        """Take the vertices of a minimum-size ring out of the heap."""
        for vertex in ring.list_vertices():
            self.heap.discard(vertex)

    def _offer(self, ring: Ring) -> None:
        """Put the non-skipped vertices of a ring back on the heap."""
        for vertex in ring.list_vertices():
            if not vertex.skipped:
                self.heap.push(vertex)

    def _exhausted(self) -> ExhaustedError:
        for ring in self.geometry.rings():
            if ring.is_at_minimum and any(not v.skipped for v in ring.list_vertices()):
                return MinimumRingSizeError('Remaining vertices belong to minimum-size rings.')
        return ExhaustedError('No remaining vertices.')


__all__ = [
    'Simplifier',
    'SimplificationHistory',
]
