"""Crime query helpers."""

from .aggregation import calculate_bounds, count_categories
from .service import CrimeQueryService
from .validation import (
    CoordinateValidationError,
    InvalidCoordinateFormat,
    LatitudeOutOfRange,
    LongitudeOutOfRange,
    validate_coordinates,
)

__all__ = [
    "CrimeQueryService",
    "calculate_bounds",
    "count_categories",
    "validate_coordinates",
    "CoordinateValidationError",
    "InvalidCoordinateFormat",
    "LatitudeOutOfRange",
    "LongitudeOutOfRange",
]
