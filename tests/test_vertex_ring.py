from unittest.mock import Mock

import pytest

from polyshrink.core.errors import (
    InvalidRestoreOrderError,
    InvalidStateError,
    MinimumRingSizeError,
)
from polyshrink.core.geometry_utils import link_endpoints
from polyshrink.geometry import Ring, Vertex


SQUARE = [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]


class TestVertex:
    """Tests for vertex linking and lazy area."""

    def test_area_from_neighbours(self):
        ring = Ring([[0, 0], [0, 10], [9, 9], [10, 10], [10, 0]])
        vertex = ring.vertex_at(2)
        assert vertex.prev.point == (0.0, 10.0)
        assert vertex.next.point == (10.0, 10.0)
        assert vertex.get_area() == pytest.approx(5.0)

    def test_unlinked_vertex_has_no_area(self):
        vertex = Vertex((0.0, 0.0))
        with pytest.raises(InvalidStateError, match='prev not set'):
            vertex.get_area()

    def test_area_recomputed_after_relink(self):
        ring = Ring(SQUARE)
        corner = ring.vertex_at(1)
        assert corner.get_area() == pytest.approx(50.0)

        corner.next = ring.vertex_at(0)
        assert corner.get_area() == pytest.approx(0.0)

    def test_relink_notifies_ring_observers(self):
        ring = Ring(SQUARE)
        observer = Mock()
        ring.add_observer(observer)

        vertex = ring.vertex_at(0)
        vertex.prev = ring.vertex_at(2)

        observer.on_vertex_changed.assert_called_once_with(vertex)

    def test_neighbours_must_share_ring(self):
        first = Ring(SQUARE)
        second = Ring(SQUARE)
        with pytest.raises(InvalidStateError):
            first.vertex_at(0).next = second.vertex_at(1)

    def test_uids_increase_with_creation(self):
        ring = Ring(SQUARE)
        uids = [ring.vertex_at(i).uid for i in range(4)]
        assert uids == sorted(uids)
        assert len(set(uids)) == 4


class TestRing:
    """Tests for ring construction, removal and restoration."""

    def test_closed_and_open_input_agree(self):
        closed = Ring(SQUARE)
        opened = Ring(SQUARE[:-1])
        assert closed.points() == opened.points()
        assert closed.vertex_count == opened.vertex_count == 4

    def test_vertex_count_tracks_removal_and_restore(self):
        ring = Ring(SQUARE)
        assert ring.vertex_count == 4
        assert ring.rings() == [ring]

        vertex = ring.vertex_at(2)
        vertex.remove()
        assert ring.vertex_count == 3
        assert len(ring.list_vertices()) == 3

        vertex.restore()
        assert ring.vertex_count == 4

    def test_original_area(self):
        ring = Ring(SQUARE)
        assert ring.original_area == pytest.approx(100.0)
        assert ring.area_changed == 0.0

    def test_circular_links(self):
        ring = Ring(SQUARE)
        first = ring.vertex_at(0)
        last = ring.vertex_at(3)
        assert first.prev is last
        assert last.next is first

    def test_remove_vertex(self):
        ring = Ring(SQUARE)
        vertex = ring.vertex_at(1)
        prev, nxt = vertex.prev, vertex.next

        vertex.remove()

        assert ring.vertex_count == 3
        assert ring.slots[1] is None
        assert prev.next is nxt
        assert nxt.prev is prev
        assert ring.area_changed == pytest.approx(50.0)
        assert ring.relative_area_changed == pytest.approx(0.5)

    def test_removed_vertex_keeps_its_neighbours(self):
        ring = Ring(SQUARE)
        vertex = ring.vertex_at(1)
        vertex.remove()
        assert vertex.prev is ring.vertex_at(0)
        assert vertex.next is ring.vertex_at(2)

    def test_remove_twice_raises(self):
        ring = Ring([[0, 0], [0, 10], [5, 12], [10, 10], [10, 0]])
        vertex = ring.vertex_at(2)
        vertex.remove()
        with pytest.raises(InvalidStateError):
            vertex.remove()

    def test_remove_below_minimum_raises(self):
        ring = Ring(SQUARE)
        ring.vertex_at(0).remove()
        assert ring.is_at_minimum
        with pytest.raises(MinimumRingSizeError):
            ring.vertex_at(1).remove()
        assert ring.vertex_count == 3

    def test_hole_ring_can_collapse(self):
        ring = Ring(SQUARE, min_vertex_count=0)
        for index in range(4):
            ring.vertex_at(index).remove()
        assert ring.vertex_count == 0
        assert not ring.is_at_minimum
        assert ring.to_coordinates() == []

    def test_restore_is_inverse_of_remove(self):
        ring = Ring(SQUARE)
        vertex = ring.vertex_at(2)
        vertex.remove()
        vertex.restore()

        assert ring.vertex_count == 4
        assert ring.slots[2] is vertex
        assert ring.area_changed == pytest.approx(0.0)
        assert ring.to_coordinates() == [[0.0, 0.0], [0.0, 10.0], [10.0, 10.0], [10.0, 0.0], [0.0, 0.0]]

    def test_restore_out_of_order_raises(self):
        ring = Ring([[0, 0], [0, 10], [5, 12], [10, 10], [10, 0]])
        first = ring.vertex_at(2)
        second = ring.vertex_at(3)
        first.remove()
        second.remove()

        with pytest.raises(InvalidRestoreOrderError, match='Incorrect restoration order'):
            first.restore()

        second.restore()
        first.restore()
        assert ring.vertex_count == 5

    def test_restore_live_vertex_raises(self):
        ring = Ring(SQUARE)
        with pytest.raises(InvalidStateError):
            ring.vertex_at(0).restore()

    def test_to_coordinates_is_closed(self):
        ring = Ring(SQUARE[:-1])
        coordinates = ring.to_coordinates()
        assert coordinates[0] == coordinates[-1]
        assert len(coordinates) == 5

    def test_to_coordinates_follows_live_vertices(self):
        ring = Ring([[0, 0], [0, 10], [9, 9], [10, 10], [10, 0]])
        ring.vertex_at(0).remove()
        coordinates = ring.to_coordinates()
        assert coordinates == [[0.0, 10.0], [9.0, 9.0], [10.0, 10.0], [10.0, 0.0], [0.0, 10.0]]
        assert coordinates == [[x, y] for x, y in link_endpoints(ring.points())]

    def test_line_segments(self):
        ring = Ring(SQUARE)
        segments = ring.line_segments()
        assert len(segments) == 4
        assert ((0.0, 0.0), (0.0, 10.0)) in segments
        assert ((10.0, 0.0), (0.0, 0.0)) in segments

    def test_degenerate_ring_has_no_segments(self):
        ring = Ring([[0, 0], [1, 1]])
        assert ring.line_segments() == []
        assert ring.to_coordinates() == []

    def test_self_intersections(self):
        assert not Ring(SQUARE).has_self_intersections()
        assert Ring([[0, 0], [10, 10], [10, 0], [0, 10]]).has_self_intersections()

    def test_zero_area_ring(self):
        ring = Ring([[0, 0], [1, 1], [2, 2], [3, 3]])
        assert ring.original_area == 0.0
        assert ring.relative_area_changed == 0.0
