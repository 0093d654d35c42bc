"""Coordinate primitives exchanged with the map host."""

from __future__ import annotations

import json
import math
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator

Coordinate = tuple[float, float]
"""Shapely-ordered coordinate: (longitude, latitude)."""


class LatLng(BaseModel):
    """A geographic point as the map host records it (degrees).

    Equality is exact: two points are the same vertex only when both
    values match bit for bit. Ring closure depends on this.
    """

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @field_validator("lat", "lng")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Coordinate values must be finite")
        return v

    def as_coordinate(self) -> Coordinate:
        """Return the (lng, lat) pair used by the geometry engine."""
        return (self.lng, self.lat)

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> LatLng:
        x, y = coordinate
        return cls(lat=float(y), lng=float(x))

    def as_record(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


class Bounds(BaseModel):
    """Bounding box reported as north-west and south-east corners."""

    nw: LatLng
    se: LatLng


_PATH_ADAPTER = TypeAdapter(list[LatLng])


def parse_path(data: object) -> list[LatLng]:
    """Validate a list of ``{"lat", "lng"}`` records into LatLng points."""
    return _PATH_ADAPTER.validate_python(data)


def load_path(path: Path) -> list[LatLng]:
    """Load a JSON array of ``{"lat", "lng"}`` records from disk."""
    return parse_path(json.loads(path.read_text()))
