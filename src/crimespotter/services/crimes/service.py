"""Crime query service consumed by the HTTP handlers."""

from __future__ import annotations

import logging
from typing import Any

from ...config import settings
from ...errors import BadGateway, BadRequest, GatewayTimeout, InternalError
from ...models.domain import CrimeQueryResult
from ..police.client import PoliceAPIClient, UpstreamError, UpstreamTimeout
from ..police.dates_cache import DatesCache, latest_date
from .aggregation import calculate_bounds, count_categories
from .validation import CoordinateValidationError, format_degrees, validate_coordinates

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch crime data. Please try again."
EMPTY_RESULT_MESSAGE = "No crimes found in this area for the selected period"


class CrimeQueryService:
    def __init__(self, client: PoliceAPIClient, dates_cache: DatesCache) -> None:
        self.client = client
        self.dates_cache = dates_cache

    def get_crimes(self, lat: Any, lng: Any, date: str | None = None) -> CrimeQueryResult:
        """Validate the point, resolve the month, fetch crimes and aggregate them.

        Raises ``BadRequest`` for rejected coordinates, ``GatewayTimeout`` or
        ``BadGateway`` for upstream failures and ``InternalError`` otherwise.
        """
        try:
            coordinate = validate_coordinates(lat, lng)
        except CoordinateValidationError as exc:
            raise BadRequest(str(exc)) from exc

        query_lat = format_degrees(coordinate.latitude)
        query_lng = format_degrees(coordinate.longitude)

        try:
            query_date = date or self.dates_cache.resolve_latest_date()
            crimes = self.client.fetch_crimes(query_lat, query_lng, query_date)
        except UpstreamTimeout as exc:
            logger.error("/api/crimes upstream timeout: %s", exc.message)
            raise GatewayTimeout(FETCH_FAILED_MESSAGE, details=exc.message) from exc
        except UpstreamError as exc:
            logger.error("/api/crimes upstream error: %s", exc.message)
            raise BadGateway(FETCH_FAILED_MESSAGE, details=exc.message) from exc
        except Exception as exc:
            logger.exception("/api/crimes unexpected error: %s", exc)
            raise InternalError(FETCH_FAILED_MESSAGE, details=str(exc)) from exc

        logger.info("Found %d crimes for %s, %s", len(crimes), query_lat, query_lng)
        return CrimeQueryResult(
            location=f"{query_lat}, {query_lng}",
            date=query_date,
            crimes=crimes,
            categories=count_categories(crimes),
            bounds=calculate_bounds(crimes),
            sample=crimes[0] if crimes else None,
            message=None if crimes else EMPTY_RESULT_MESSAGE,
        )

    def get_dates(self, limit: int | None = None) -> dict[str, Any]:
        """Recent reporting months straight from upstream, bypassing the cache."""
        dates = self.client.fetch_dates()
        latest = latest_date(dates)
        return {"dates": dates[: limit or settings.dates_list_limit], "latest": latest}

    def get_forces(self) -> list[dict[str, Any]]:
        return self.client.fetch_forces()
