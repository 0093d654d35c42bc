"""End-to-end tests: raw host paths through the engine entry points."""

import math

import pytest
from shapely.geometry import Point, Polygon

from mapdraw_shape import LatLng, build_shape_result, process_polygon, process_shape


def _path(*pairs: tuple[float, float]) -> list[LatLng]:
    """Build a path from (lat, lng) pairs."""
    return [LatLng(lat=lat, lng=lng) for lat, lng in pairs]


@pytest.fixture
def lisbon_triangle() -> list[LatLng]:
    return _path((38.7176, -9.3440), (39.7810, -8.8221), (38.9102, -6.8226))


@pytest.fixture
def unit_square() -> list[LatLng]:
    return _path((0, 0), (0, 1), (1, 1), (1, 0), (0, 0))


@pytest.fixture
def figure_eight() -> list[LatLng]:
    """Drag that crosses itself once at (lat 1, lng 1)."""
    return _path((0, 0), (2, 2), (0, 2), (2, 0))


class TestProcessPolygon:
    def test_open_triangle_closed(self, lisbon_triangle):
        polygons = process_polygon(lisbon_triangle)
        assert len(polygons) == 1
        assert len(polygons[0]) == 4
        assert polygons[0][0] == polygons[0][-1]
        assert set(polygons[0]) == set(lisbon_triangle)

    def test_degenerate_path_empty(self):
        assert process_polygon(_path((0, 0), (0, 0))) == []

    def test_too_few_points(self):
        assert process_polygon([]) == []
        assert process_polygon(_path((0, 0), (1, 1))) == []

    def test_collinear_path_empty(self):
        assert process_polygon(_path((0, 0), (1, 1), (2, 2))) == []

    def test_repeated_point_empty(self):
        assert process_polygon(_path((3, 3), (3, 3), (3, 3))) == []

    def test_figure_eight_split(self, figure_eight):
        polygons = process_polygon(figure_eight)
        assert len(polygons) == 2
        for path in polygons:
            assert path[0] == path[-1]
            assert len(path) == 4
            shell = Polygon([p.as_coordinate() for p in path])
            assert shell.is_valid
            assert math.isclose(shell.area, 1.0)

    def test_deterministic(self, figure_eight):
        assert process_polygon(figure_eight) == process_polygon(figure_eight)

    def test_clockwise_output(self, lisbon_triangle):
        path = process_polygon(lisbon_triangle)[0]
        shell = Polygon([p.as_coordinate() for p in path])
        assert not shell.exterior.is_ccw

    def test_free_hand_simplified(self):
        circle = Point(-9.0, 38.0).buffer(0.5, quad_segs=64)
        drag = [LatLng.from_coordinate(c) for c in list(circle.exterior.coords)[:-1]]
        polygons = process_polygon(drag, simplify_zoom=8)
        assert len(polygons) == 1
        assert 4 <= len(polygons[0]) < len(drag)

    def test_zoom_on_triangle_keeps_it(self, lisbon_triangle):
        polygons = process_polygon(lisbon_triangle, simplify_zoom=12)
        assert len(polygons) == 1
        assert len(polygons[0]) == 4

    def test_zoom_zero_skips_simplification(self):
        """Zoom 0 is the world view; it is treated like no zoom at all."""
        circle = Point(-9.0, 38.0).buffer(0.5, quad_segs=64)
        drag = [LatLng.from_coordinate(c) for c in list(circle.exterior.coords)[:-1]]
        polygons = process_polygon(drag, simplify_zoom=0)
        assert polygons == process_polygon(drag)
        assert len(polygons[0]) == len(drag) + 1


class TestProcessShape:
    def test_closed_square_validated(self, unit_square):
        polygons = process_shape(unit_square, validate=True)
        assert polygons == [
            _path((0, 0), (1, 0), (1, 1), (0, 1), (0, 0)),
        ]
        assert set(polygons[0]) == set(unit_square)

    def test_without_validation_returns_rings(self, unit_square):
        assert process_shape(unit_square) == [unit_square]

    def test_without_validation_keeps_invalid(self, figure_eight):
        rings = process_shape(figure_eight, validate=False)
        assert rings == [figure_eight + [figure_eight[0]]]

    def test_two_loops_two_polygons(self):
        shape = _path(
            (0, 0), (0, 1), (1, 1), (0, 0),
            (5, 5), (5, 6), (6, 6), (5, 5),
        )
        polygons = process_shape(shape, validate=True)
        assert len(polygons) == 2
        assert all(p[0] == p[-1] for p in polygons)

    def test_bad_loop_dropped_good_kept(self):
        shape = _path(
            (0, 0), (0, 1), (1, 1), (0, 0),
            (5, 5), (6, 6), (7, 7), (5, 5),
        )
        polygons = process_shape(shape, validate=True)
        assert len(polygons) == 1
        assert set(polygons[0]) == set(_path((0, 0), (0, 1), (1, 1)))

    def test_only_degenerate_loops(self):
        assert process_shape(_path((0, 0), (1, 1), (0, 0)), validate=True) == []

    def test_validation_idempotent(self, figure_eight):
        once = process_shape(figure_eight, validate=True)
        flat = [p for polygon in once for p in polygon]
        again = process_shape(flat, validate=True)
        assert again == once


class TestShapeResult:
    def test_records_concatenated(self, figure_eight):
        result = build_shape_result(process_polygon(figure_eight))
        assert len(result.records) == 8
        assert all(set(r) == {"lat", "lng"} for r in result.records)

    def test_empty(self):
        result = build_shape_result(process_polygon(_path((0, 0), (0, 0))))
        assert result.is_empty
        assert result.records == []
        assert result.highest_point is None
