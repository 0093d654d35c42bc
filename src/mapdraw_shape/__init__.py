"""Map shape geometry engine: traced paths to clean, simple polygons."""

from mapdraw_shape.engine import build_shape_result, process_polygon, process_shape
from mapdraw_shape.models.geometry import LatLng
from mapdraw_shape.models.shape import ShapeResult

__version__ = "0.1.0"

__all__ = [
    "build_shape_result",
    "process_polygon",
    "process_shape",
    "LatLng",
    "ShapeResult",
]
