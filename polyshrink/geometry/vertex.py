"""Vertex records of a ring."""

from itertools import count
from typing import TYPE_CHECKING, Optional

from ..core.errors import InvalidStateError
from ..core.geometry_utils import Point, triangle_area

if TYPE_CHECKING:
    from .ring import Ring

_uids = count()


class Vertex:
    """One point of a ring, linked to its neighbours.

    Neighbours are stored as slot indices into the owning ring's vertex
    arena and exposed as :class:`Vertex` objects through ``prev`` and
    ``next``. Assigning either clears the cached triangle area and notifies
    the ring; the area is recomputed lazily on the next :meth:`get_area`.

    Attributes:
        point: ``(x, y)`` coordinates
        ring: Owning ring, or None for a detached vertex
        index: Slot number in the owning ring
        uid: Creation order, used to break ties between equal areas
        skipped: True once the vertex is permanently excluded from removal
    """

    __slots__ = ('point', 'ring', 'index', 'uid', 'skipped', '_prev', '_next', '_area')

    def __init__(self, point: Point, ring: Optional['Ring'] = None, index: int = 0):
        self.point = point
        self.ring = ring
        self.index = index
        self.uid = next(_uids)
        self.skipped = False
        self._prev: Optional[int] = None
        self._next: Optional[int] = None
        self._area: Optional[float] = None

    def __repr__(self) -> str:
        return f"Vertex({self.point!r}, index={self.index})"

    @property
    def prev(self) -> Optional['Vertex']:
        if self._prev is None:
            return None
        return self.ring.vertex_at(self._prev)

    @prev.setter
    def prev(self, vertex: 'Vertex') -> None:
        self._prev = self._slot_of(vertex)
        self._changed()

    @property
    def next(self) -> Optional['Vertex']:
        if self._next is None:
            return None
        return self.ring.vertex_at(self._next)

    @next.setter
    def next(self, vertex: 'Vertex') -> None:
        self._next = self._slot_of(vertex)
        self._changed()

    def get_area(self) -> float:
        """Area of the triangle formed with the current neighbours.

        Raises:
            InvalidStateError: If the vertex is not linked into a ring
        """
        if self._area is None:
            if self._prev is None:
                raise InvalidStateError('prev not set.')
            if self._next is None:
                raise InvalidStateError('next not set.')
            self._area = triangle_area(self.point, self.prev.point, self.next.point)
        return self._area

    def remove(self) -> None:
        """Remove the vertex from its ring."""
        self.ring.remove_vertex(self)

    def restore(self) -> None:
        """Return the vertex to its ring."""
        self.ring.restore_vertex(self)

    def _slot_of(self, vertex: 'Vertex') -> int:
        if self.ring is None or vertex.ring is not self.ring:
            raise InvalidStateError('Neighbours must belong to the same ring.')
        return vertex.index

    def _changed(self) -> None:
        self._area = None
        self.ring.on_vertex_changed(self)


__all__ = [
    'Vertex',
]
