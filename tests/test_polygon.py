from unittest.mock import Mock

import pytest

from polyshrink.geometry import MultiPolygonGeometry, PolygonGeometry


OUTER = [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]
HOLE = [[2, 2], [2, 4], [4, 4], [4, 2], [2, 2]]
OTHER = [[20, 0], [20, 5], [25, 5], [25, 0], [20, 0]]


class TestPolygonGeometry:
    """Tests for polygon composition."""

    def test_area_subtracts_holes(self):
        polygon = PolygonGeometry([OUTER, HOLE])
        assert polygon.area == pytest.approx(96.0)

    def test_hole_rings_can_collapse(self):
        polygon = PolygonGeometry([OUTER, HOLE])
        assert polygon.outer.min_vertex_count == 3
        assert polygon.holes[0].min_vertex_count == 0

    def test_vertex_count(self):
        polygon = PolygonGeometry([OUTER, HOLE])
        assert polygon.vertex_count == 8
        assert len(polygon.list_vertices()) == 8

    def test_to_geojson(self):
        polygon = PolygonGeometry([OUTER, HOLE])
        result = polygon.to_geojson()
        assert result['type'] == 'Polygon'
        assert len(result['coordinates']) == 2
        assert result['coordinates'][0] == [[float(x), float(y)] for x, y in OUTER]

    def test_collapsed_hole_is_dropped(self):
        polygon = PolygonGeometry([OUTER, HOLE])
        hole = polygon.holes[0]
        hole.vertex_at(0).remove()
        hole.vertex_at(1).remove()

        assert hole.vertex_count == 2
        assert polygon.to_coordinates() == [[[float(x), float(y)] for x, y in OUTER]]

    def test_line_segments_cover_all_rings(self):
        polygon = PolygonGeometry([OUTER, HOLE])
        assert len(polygon.line_segments()) == 8

    def test_hole_crossing_outer_intersects(self):
        crossing = [[8, 8], [8, 12], [12, 12], [12, 8], [8, 8]]
        assert PolygonGeometry([OUTER, crossing]).has_intersections()
        assert not PolygonGeometry([OUTER, HOLE]).has_intersections()

    def test_changes_propagate_to_observers(self):
        polygon = PolygonGeometry([OUTER, HOLE])
        observer = Mock()
        polygon.add_observer(observer)

        vertex = polygon.holes[0].vertex_at(1)
        vertex.remove()

        changed = [call.args[0] for call in observer.on_vertex_changed.call_args_list]
        assert vertex.prev in changed
        assert vertex.next in changed

    def test_remove_observer(self):
        polygon = PolygonGeometry([OUTER])
        observer = Mock()
        polygon.add_observer(observer)
        polygon.remove_observer(observer)

        polygon.outer.vertex_at(1).remove()
        observer.on_vertex_changed.assert_not_called()


class TestMultiPolygonGeometry:
    """Tests for multi-polygon composition."""

    def test_area_and_count(self):
        multi = MultiPolygonGeometry([[OUTER, HOLE], [OTHER]])
        assert multi.area == pytest.approx(96.0 + 25.0)
        assert multi.vertex_count == 12

    def test_rings_in_order(self):
        multi = MultiPolygonGeometry([[OUTER, HOLE], [OTHER]])
        rings = multi.rings()
        assert len(rings) == 3
        assert rings[0] is multi.polygons[0].outer
        assert rings[2] is multi.polygons[1].outer

    def test_to_geojson(self):
        multi = MultiPolygonGeometry([[OUTER], [OTHER]])
        result = multi.to_geojson()
        assert result['type'] == 'MultiPolygon'
        assert len(result['coordinates']) == 2
        assert result['coordinates'][1][0][0] == [20.0, 0.0]

    def test_changes_propagate_through_polygons(self):
        multi = MultiPolygonGeometry([[OUTER], [OTHER]])
        observer = Mock()
        multi.add_observer(observer)

        multi.polygons[1].outer.vertex_at(0).remove()
        assert observer.on_vertex_changed.call_count == 2
