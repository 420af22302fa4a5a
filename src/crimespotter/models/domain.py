"""Domain models for coordinates, cache entries and crime query results."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A validated (latitude, longitude) pair in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class DatesCacheEntry:
    """Latest reporting month and when it was fetched.

    Entries are immutable; the cache swaps in a new instance on every refresh.
    """

    value: str
    fetched_at: float
    ttl: float

    def is_fresh(self, now: float) -> bool:
        return now - self.fetched_at < self.ttl


@dataclass(frozen=True, slots=True)
class BoundingBox:
    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True, slots=True)
class City:
    """Represents a UK city the front-end can jump to."""

    slug: str
    name: str
    lat: float
    lng: float
    region: str


@dataclass(slots=True)
class CrimeQueryResult:
    """Crimes near a point for one reporting month, plus derived aggregates."""

    location: str
    date: str
    crimes: list[dict[str, Any]]
    categories: dict[str, int]
    bounds: Optional[BoundingBox]
    sample: Optional[dict[str, Any]] = None
    message: Optional[str] = None
    count: int = field(init=False)

    def __post_init__(self) -> None:
        self.count = len(self.crimes)


@dataclass(frozen=True, slots=True)
class ContactSubmission:
    name: str
    email: str
    subject: str
    message: str
