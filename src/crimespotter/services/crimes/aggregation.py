"""Aggregate views derived from a list of street-level crime records."""

from __future__ import annotations

from collections import Counter
from typing import Any, Sequence

from ...models.domain import BoundingBox
from ..geospatial import bounding_box, record_points

UNKNOWN_CATEGORY = "unknown"


def count_categories(crimes: Sequence[dict[str, Any]]) -> dict[str, int]:
    """Count records per ``category``; missing or empty categories count as "unknown"."""

    counts: Counter[str] = Counter()
    for crime in crimes or ():
        category = crime.get("category") if isinstance(crime, dict) else None
        counts[category or UNKNOWN_CATEGORY] += 1
    return dict(counts)


def calculate_bounds(crimes: Sequence[dict[str, Any]]) -> BoundingBox | None:
    return bounding_box(record_points(crimes or ()))
