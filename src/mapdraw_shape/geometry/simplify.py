"""Zoom-aware simplification of free-hand polygons.

Free-hand drags produce one vertex per mouse event, far more than the
shape needs at the zoom it was drawn at. Tolerances are in raw degrees of
lon/lat, not meters.
"""

from __future__ import annotations

from shapely.geometry import Polygon

DEFAULT_TOLERANCE = 0.1

# (min zoom, max zoom, tolerance), inclusive ranges
ZOOM_TOLERANCES: list[tuple[int, int, float]] = [
    (7, 9, 0.01),
    (10, 13, 0.001),
    (14, 17, 0.0001),
    (18, 22, 0.00001),
]


def tolerance_for_zoom(zoom: int | None) -> float:
    """Distance tolerance for a map zoom level. Unknown zooms get the coarsest."""
    if zoom is None:
        return DEFAULT_TOLERANCE
    for low, high, tolerance in ZOOM_TOLERANCES:
        if low <= zoom <= high:
            return tolerance
    return DEFAULT_TOLERANCE


def simplify_polygon(polygon: Polygon, zoom: int | None) -> Polygon:
    """Reduce vertex count without introducing self-intersections.

    Uses the topology-preserving Douglas-Peucker variant, so a valid
    input stays valid. Invalid input is passed through the same way and
    left for the validator to repair.
    """
    return polygon.simplify(tolerance_for_zoom(zoom), preserve_topology=True)
