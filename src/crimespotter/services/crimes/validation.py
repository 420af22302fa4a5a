"""Coordinate parsing and range checks for query-string input."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from ...models.domain import Coordinate

# ASCII digits only, optional sign, fraction and exponent
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class CoordinateValidationError(ValueError):
    """Base class for rejected coordinate input."""


class InvalidCoordinateFormat(CoordinateValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid coordinate format")


class LatitudeOutOfRange(CoordinateValidationError):
    def __init__(self) -> None:
        super().__init__("Latitude must be between -90 and 90")


class LongitudeOutOfRange(CoordinateValidationError):
    def __init__(self) -> None:
        super().__init__("Longitude must be between -180 and 180")


def _parse_degrees(value: Any) -> float:
    text = "" if value is None else str(value).strip()
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise InvalidCoordinateFormat()
    parsed = float(text)
    if not math.isfinite(parsed):
        raise InvalidCoordinateFormat()
    return parsed


def validate_coordinates(lat: Any, lng: Any) -> Coordinate:
    """Parse and range-check a latitude/longitude pair."""

    latitude = _parse_degrees(lat)
    longitude = _parse_degrees(lng)
    if not -90 <= latitude <= 90:
        raise LatitudeOutOfRange()
    if not -180 <= longitude <= 180:
        raise LongitudeOutOfRange()
    return Coordinate(latitude=latitude, longitude=longitude)


def format_degrees(value: float) -> str:
    """Render degrees in positional notation as sent upstream: ``51.0`` becomes ``51``."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
