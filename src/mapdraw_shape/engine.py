"""Shape processing entry points.

Two ways in, matching the two ways a shape reaches the map:

- ``process_shape``: a shape the host already has (persisted, or supplied
  on start-up). May hold several loops in one flat list.
- ``process_polygon``: a path the user just finished drawing, by clicks or
  free-hand. Treated as a single loop closed on itself.

Both return one closed path per resulting polygon, or ``[]`` when nothing
usable can be derived. Calls share no state.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shapely.geometry import Polygon

from mapdraw_shape.geometry.convert import flatten_geometry, rings_to_geometry
from mapdraw_shape.geometry.rings import MIN_PATH_POINTS, extract_rings
from mapdraw_shape.geometry.simplify import simplify_polygon
from mapdraw_shape.models.geometry import LatLng
from mapdraw_shape.models.shape import ShapeResult
from mapdraw_shape.validators.topology import validate_geometry

logger = logging.getLogger(__name__)


def process_shape(points: Sequence[LatLng], validate: bool = False) -> list[list[LatLng]]:
    """Split a stored shape into rings, optionally validating them.

    Without ``validate`` the extracted rings are returned as they are;
    use that only for shapes known to be good.
    """
    rings = extract_rings(points)
    logger.debug("Extracted %d ring(s) from %d point(s)", len(rings), len(points))

    if not validate:
        return rings
    if not rings:
        return []

    valid = validate_geometry(rings_to_geometry(rings))
    if valid is None:
        logger.debug("Shape has no valid polygon after repair")
        return []
    return flatten_geometry(valid)


def process_polygon(
    path: Sequence[LatLng],
    simplify_zoom: int | None = None,
) -> list[list[LatLng]]:
    """Turn a freshly drawn path into simple polygons.

    Args:
        path: Points in drawing order. The path is closed on itself.
        simplify_zoom: Map zoom at draw completion. When set (and not
            0), the polygon is simplified before validation (free-hand drawing).

    Returns:
        One closed path per polygon, ``[]`` if none could be derived.
    """
    polygon = drawn_polygon(path, simplify_zoom)
    if polygon is None:
        return []

    valid = validate_geometry(polygon)
    if valid is None:
        logger.debug("Drawn path has no valid polygon after repair")
        return []
    return flatten_geometry(valid)


def drawn_polygon(
    path: Sequence[LatLng],
    simplify_zoom: int | None = None,
) -> Polygon | None:
    """Close a drawn path on itself and simplify it, before validation.

    Zoom 0 (world view) and None both skip simplification. None when the
    path has too few points.
    """
    if len(path) < MIN_PATH_POINTS:
        return None

    coordinates = [p.as_coordinate() for p in path]
    coordinates.append(coordinates[0])
    polygon = Polygon(coordinates)

    if simplify_zoom:
        before = len(polygon.exterior.coords)
        polygon = simplify_polygon(polygon, simplify_zoom)
        logger.debug(
            "Simplified at zoom %s: %d -> %d vertices",
            simplify_zoom, before, len(polygon.exterior.coords),
        )
    return polygon


def build_shape_result(polygons: list[list[LatLng]]) -> ShapeResult:
    return ShapeResult(polygons=polygons)
