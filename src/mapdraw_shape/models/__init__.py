"""Shape data models."""

from mapdraw_shape.models.geometry import Bounds, Coordinate, LatLng, load_path, parse_path
from mapdraw_shape.models.shape import ShapeResult

__all__ = [
    "Bounds",
    "Coordinate",
    "LatLng",
    "load_path",
    "parse_path",
    "ShapeResult",
]
