"""Simple-polygon validation and topology repair.

A hand-drawn boundary that crosses itself is not a valid polygon. Repair
rebuilds the planar graph of each bad boundary, lets the polygonizer
enumerate the simple faces it encloses, and folds those faces together
with symmetric difference. Faces that only exist because the stroke
crossed itself cancel out; the areas the user actually enclosed (odd
winding) remain.

Repair never raises. A boundary that encloses no face at all is dropped.
"""

from __future__ import annotations

import logging

from shapely.geometry import LineString, MultiPolygon, Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import polygonize, unary_union
from shapely.validation import explain_validity

from mapdraw_shape.geometry.convert import PolygonalGeometry

logger = logging.getLogger(__name__)


def validate_geometry(geometry: PolygonalGeometry) -> PolygonalGeometry | None:
    """Return ``geometry`` as simple, normalized polygon(s), or None.

    Valid polygons (and multi-polygons whose every component is valid)
    are only normalized. Invalid components are repaired together; if
    they yield no faces they are dropped and only the valid siblings
    remain. None means no usable polygon could be derived.

    Validity is checked per component, so a MultiPolygon result is not
    necessarily valid as a whole: valid siblings and repaired parts are
    put side by side and may overlap one another. Each polygon in it is
    simple on its own.
    """
    if geometry.geom_type == "Polygon":
        if geometry.is_valid:
            result = geometry
        else:
            logger.debug("Repairing polygon: %s", explain_validity(geometry))
            result = repair_polygons([geometry])

    elif geometry.geom_type == "MultiPolygon":
        components = list(geometry.geoms)
        invalid = [p for p in components if not p.is_valid]
        if not invalid:
            result = geometry
        else:
            valid = [p for p in components if p.is_valid]
            logger.debug(
                "Repairing %d of %d multi-polygon components", len(invalid), len(components)
            )
            repaired = repair_polygons(invalid)
            if repaired is None:
                logger.debug("Dropped %d unrepairable component(s)", len(invalid))
            result = from_parts(valid + polygon_parts(repaired))

    else:
        raise TypeError(f"Expected Polygon or MultiPolygon, got {geometry.geom_type}")

    if result is None or result.is_empty:
        return None
    return normalize_geometry(result)


def normalize_geometry(geometry: PolygonalGeometry) -> PolygonalGeometry:
    """Canonical form: clockwise shells, fixed start vertex, sorted parts."""
    return geometry.normalize()


def repair_polygons(polygons: list[Polygon]) -> PolygonalGeometry | None:
    """Rebuild simple polygons from the boundaries of invalid ``polygons``."""
    lines: list[LineString] = []
    for polygon in polygons:
        for ring in [polygon.exterior, *polygon.interiors]:
            # Fewer than 3 distinct vertices cannot enclose a face.
            if len(set(ring.coords)) < 3:
                continue
            lines.extend(_line_parts(node_boundary(ring)))

    faces = sorted(polygonize(lines), key=_face_key) if lines else []
    logger.debug("Polygonizer produced %d face(s) from %d line(s)", len(faces), len(lines))

    if not faces:
        return None
    if len(faces) == 1:
        return faces[0]

    result: BaseGeometry = faces[0]
    for face in faces[1:]:
        result = result.symmetric_difference(face)

    return from_parts(polygon_parts(result))


def node_boundary(ring: BaseGeometry) -> BaseGeometry:
    """Split a boundary at every self-intersection.

    Unioning the open line with a point at its first vertex forces the
    overlay to node the whole line, so each crossing becomes a vertex
    shared by the pieces on either side.
    """
    line = LineString(ring.coords)
    return unary_union([line, Point(line.coords[0])])


def polygon_parts(geometry: BaseGeometry | None) -> list[Polygon]:
    """All non-empty polygons contained in ``geometry``."""
    if geometry is None or geometry.is_empty:
        return []
    if geometry.geom_type == "Polygon":
        return [geometry]
    if geometry.geom_type in ("MultiPolygon", "GeometryCollection"):
        parts: list[Polygon] = []
        for part in geometry.geoms:
            parts.extend(polygon_parts(part))
        return parts
    return []


def from_parts(parts: list[Polygon]) -> PolygonalGeometry | None:
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return MultiPolygon(parts)


def _line_parts(geometry: BaseGeometry) -> list[LineString]:
    if geometry.is_empty:
        return []
    if geometry.geom_type in ("LineString", "LinearRing"):
        return [geometry]
    if hasattr(geometry, "geoms"):
        lines: list[LineString] = []
        for part in geometry.geoms:
            lines.extend(_line_parts(part))
        return lines
    return []


def _face_key(face: Polygon) -> tuple:
    # Polygonizer output order is an implementation detail of GEOS.
    return (face.bounds, face.area, face.normalize().wkt)
