"""Spatial queries over processed shapes."""

from mapdraw_shape.queries.spatial import highest_point, shape_bounds

__all__ = [
    "highest_point",
    "shape_bounds",
]
