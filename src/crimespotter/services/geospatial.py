"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence

from shapely.geometry import MultiPoint

from ..models.domain import BoundingBox


def coerce_degrees(value: Any) -> float | None:
    """Parse a numeric or numeric-string coordinate, returning None if it is unusable."""

    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    return parsed if math.isfinite(parsed) else None


def bounding_box(points: Sequence[tuple[float, float]]) -> BoundingBox | None:
    """Return the min/max rectangle enclosing (lat, lon) points, or None when empty.

    Longitudes are compared as plain numbers; a set straddling the antimeridian
    yields a box spanning the whole globe east to west.
    """

    if not points:
        return None
    west, south, east, north = MultiPoint([(lon, lat) for lat, lon in points]).bounds
    return BoundingBox(north=north, south=south, east=east, west=west)


def record_points(records: Iterable[dict]) -> list[tuple[float, float]]:
    """Extract (lat, lon) pairs from records carrying ``location.latitude/longitude``."""

    points: list[tuple[float, float]] = []
    for record in records:
        location = record.get("location") if isinstance(record, dict) else None
        if not isinstance(location, dict):
            continue
        lat = coerce_degrees(location.get("latitude"))
        lon = coerce_degrees(location.get("longitude"))
        if lat is None or lon is None:
            continue
        points.append((lat, lon))
    return points
