"""Single-slot TTL cache for the latest available reporting month."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Protocol, Sequence

from ...config import settings
from ...models.domain import DatesCacheEntry
from .client import UpstreamError

logger = logging.getLogger(__name__)


class DatesSource(Protocol):
    def fetch_dates(self) -> Sequence[dict]: ...


def latest_date(dates: Sequence) -> str | None:
    """Date of the first entry, or None when the list is empty or the entry is malformed."""
    first = dates[0] if dates else None
    value = first.get("date") if isinstance(first, dict) else None
    return value if isinstance(value, str) and value else None


class DatesCache:
    """Holds the latest reporting month for ``ttl`` seconds.

    The entry is replaced wholesale on refresh so readers never observe a
    half-updated value. Refreshes are single-flight: concurrent misses wait on
    one lock and re-check freshness before going upstream.
    """

    def __init__(
        self,
        source: DatesSource,
        ttl: float | None = None,
        fallback_date: str | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self.ttl = ttl if ttl is not None else settings.dates_cache_ttl_seconds
        self.fallback_date = fallback_date or settings.fallback_date
        self._clock = clock
        self._entry: DatesCacheEntry | None = None
        self._refresh_lock = threading.Lock()

    def peek(self) -> DatesCacheEntry | None:
        return self._entry

    def _fresh_value(self) -> str | None:
        entry = self._entry
        if entry is not None and entry.is_fresh(self._clock()):
            return entry.value
        return None

    def refresh(self) -> str:
        """Fetch the dates list and store its first entry.

        Raises ``UpstreamError`` and leaves the current entry untouched when the
        upstream call fails.
        """
        dates = self._source.fetch_dates()
        latest = latest_date(dates)
        if latest is None:
            logger.warning("Dates endpoint returned no usable entries, using fallback %s", self.fallback_date)
            latest = self.fallback_date
        self._entry = DatesCacheEntry(value=latest, fetched_at=self._clock(), ttl=self.ttl)
        logger.info("Updated dates cache: %s", latest)
        return latest

    def resolve_latest_date(self) -> str:
        """Best-effort latest reporting month; never raises on upstream failure."""
        cached = self._fresh_value()
        if cached is not None:
            return cached

        with self._refresh_lock:
            cached = self._fresh_value()
            if cached is not None:
                return cached
            try:
                return self.refresh()
            except UpstreamError as exc:
                logger.error("Error fetching dates: %s", exc.message)
                return self.fallback_date
