"""Tests for spatial queries over processed shapes."""

from mapdraw_shape.models.geometry import LatLng
from mapdraw_shape.models.shape import ShapeResult
from mapdraw_shape.queries.spatial import highest_point, shape_bounds

SOUTH = [
    LatLng(lat=-34.6, lng=-58.4),
    LatLng(lat=-34.5, lng=-58.3),
    LatLng(lat=-34.7, lng=-58.2),
    LatLng(lat=-34.6, lng=-58.4),
]
NORTH = [
    LatLng(lat=10.0, lng=1.0),
    LatLng(lat=12.0, lng=2.0),
    LatLng(lat=11.0, lng=3.0),
    LatLng(lat=10.0, lng=1.0),
]


class TestHighestPoint:
    def test_southern_hemisphere(self):
        """Negative latitudes still have a highest point."""
        assert highest_point([SOUTH]) == LatLng(lat=-34.5, lng=-58.3)

    def test_across_polygons(self):
        assert highest_point([SOUTH, NORTH]) == LatLng(lat=12.0, lng=2.0)

    def test_first_wins_on_tie(self):
        a = LatLng(lat=1.0, lng=0.0)
        b = LatLng(lat=1.0, lng=5.0)
        assert highest_point([[a, b]]) is a

    def test_empty(self):
        assert highest_point([]) is None
        assert highest_point([[]]) is None


class TestShapeBounds:
    def test_corners(self):
        bounds = shape_bounds([NORTH])
        assert bounds.nw == LatLng(lat=12.0, lng=1.0)
        assert bounds.se == LatLng(lat=10.0, lng=3.0)

    def test_multiple_polygons(self):
        bounds = shape_bounds([SOUTH, NORTH])
        assert bounds.nw == LatLng(lat=12.0, lng=-58.4)
        assert bounds.se == LatLng(lat=-34.7, lng=3.0)

    def test_empty(self):
        assert shape_bounds([]) is None


class TestShapeResult:
    def test_records(self):
        result = ShapeResult(polygons=[NORTH, SOUTH])
        assert len(result.records) == 8
        assert result.records[0] == {"lat": 10.0, "lng": 1.0}
        assert result.records[4] == {"lat": -34.6, "lng": -58.4}

    def test_properties(self):
        result = ShapeResult(polygons=[NORTH])
        assert not result.is_empty
        assert result.highest_point == LatLng(lat=12.0, lng=2.0)
        assert result.bounds.nw.lat == 12.0

    def test_default_empty(self):
        assert ShapeResult().is_empty
