"""Conversion between host paths and shapely geometries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np
from shapely.geometry import LinearRing, MultiPolygon, Polygon

from mapdraw_shape.models.geometry import LatLng

PolygonalGeometry = Union[Polygon, MultiPolygon]


def ring_to_polygon(ring: Sequence[LatLng]) -> Polygon:
    """Build a shell-only polygon from a closed ring of points."""
    return Polygon([p.as_coordinate() for p in ring])


def rings_to_geometry(rings: Sequence[Sequence[LatLng]]) -> PolygonalGeometry:
    """One ring becomes a Polygon; several become a MultiPolygon.

    The MultiPolygon is built as-is, overlapping or self-intersecting
    components included. Validation happens later.
    """
    polygons = [ring_to_polygon(ring) for ring in rings]
    if len(polygons) == 1:
        return polygons[0]
    return MultiPolygon(polygons)


def ring_to_path(ring: LinearRing) -> list[LatLng]:
    """Convert a shapely ring to host points, collapsing repeated vertices."""
    coords = np.asarray(ring.coords)
    if len(coords) == 0:
        return []
    coords = coords[:, :2]

    keep = np.ones(len(coords), dtype=bool)
    keep[1:] = np.any(coords[1:] != coords[:-1], axis=1)

    return [LatLng.from_coordinate((x, y)) for x, y in coords[keep]]


def flatten_geometry(geometry: PolygonalGeometry) -> list[list[LatLng]]:
    """Flatten a normalized geometry into one exterior path per polygon.

    MultiPolygon components are emitted last-to-first. Interior rings are
    not surfaced to the host.
    """
    if geometry.geom_type == "Polygon":
        return [ring_to_path(geometry.exterior)]
    if geometry.geom_type == "MultiPolygon":
        parts = list(geometry.geoms)
        return [ring_to_path(parts[n].exterior) for n in range(len(parts) - 1, -1, -1)]
    return []
