"""Processed shape handed back to the map host."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mapdraw_shape.models.geometry import Bounds, LatLng
from mapdraw_shape.queries.spatial import highest_point, shape_bounds


class ShapeResult(BaseModel):
    """Ordered list of simple polygons, each a closed path of points.

    An empty result means "no shape", not an error.
    """

    polygons: list[list[LatLng]] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.polygons

    @property
    def records(self) -> list[dict[str, float]]:
        """Every polygon's points concatenated, as ``{"lat", "lng"}`` records.

        This is the flat form the host persists and passes to its draw
        callback.
        """
        return [p.as_record() for polygon in self.polygons for p in polygon]

    @property
    def highest_point(self) -> LatLng | None:
        return highest_point(self.polygons)

    @property
    def bounds(self) -> Bounds | None:
        return shape_bounds(self.polygons)
