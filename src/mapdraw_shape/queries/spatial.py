"""Spatial queries over a processed shape.

The host needs a couple of reference points once a shape is drawn: where
to anchor the delete overlay, and which area to frame on the map.
"""

from __future__ import annotations

from collections.abc import Sequence

from mapdraw_shape.models.geometry import Bounds, LatLng


def highest_point(polygons: Sequence[Sequence[LatLng]]) -> LatLng | None:
    """Northernmost vertex across all polygons (first one wins on ties)."""
    best: LatLng | None = None
    for polygon in polygons:
        for point in polygon:
            if best is None or point.lat > best.lat:
                best = point
    return best


def shape_bounds(polygons: Sequence[Sequence[LatLng]]) -> Bounds | None:
    """North-west / south-east corners enclosing every vertex."""
    points = [p for polygon in polygons for p in polygon]
    if not points:
        return None

    lats = [p.lat for p in points]
    lngs = [p.lng for p in points]
    return Bounds(
        nw=LatLng(lat=max(lats), lng=min(lngs)),
        se=LatLng(lat=min(lats), lng=max(lngs)),
    )
