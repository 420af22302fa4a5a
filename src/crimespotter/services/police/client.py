"""HTTP client for the data.police.uk API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ...config import settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The police API could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class UpstreamTimeout(UpstreamError):
    """The police API did not answer within the request deadline."""


class PoliceAPIClient:
    """Single-shot GETs against the police API. No retries are attempted."""

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        dates_timeout: float | None = None,
        forces_timeout: float | None = None,
        crimes_timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.police_api_base_url).rstrip("/")
        self.user_agent = user_agent or settings.police_api_user_agent
        self.dates_timeout = dates_timeout if dates_timeout is not None else settings.dates_timeout_seconds
        self.forces_timeout = forces_timeout if forces_timeout is not None else settings.forces_timeout_seconds
        self.crimes_timeout = crimes_timeout if crimes_timeout is not None else settings.crimes_timeout_seconds
        self._transport = transport

    def _get_client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(timeout), transport=self._transport)

    def _get_json_list(
        self,
        path: str,
        *,
        timeout: float,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> list[Any]:
        url = f"{self.base_url}{path}"
        with self._get_client(timeout) as client:
            try:
                response = client.get(url, params=params, headers=headers)
                response.raise_for_status()
            except httpx.TimeoutException as exc:
                raise UpstreamTimeout(f"UK Police API timeout after {timeout:g}s: {path}") from exc
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                raise UpstreamError(
                    f"UK Police API error: {status_code} {exc.response.reason_phrase}",
                    status=status_code,
                ) from exc
            except httpx.HTTPError as exc:
                raise UpstreamError(f"UK Police API request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError("UK Police API returned invalid JSON", status=response.status_code) from exc
        if not isinstance(payload, list):
            raise UpstreamError(
                f"UK Police API returned unexpected payload type {type(payload).__name__}",
                status=response.status_code,
            )
        return payload

    def fetch_dates(self) -> list[dict[str, Any]]:
        """Available reporting months, most recent first as ordered upstream."""
        return self._get_json_list("/crimes-street-dates", timeout=self.dates_timeout)

    def fetch_crimes(self, lat: str, lng: str, date: str) -> list[dict[str, Any]]:
        """Street-level crimes within a one mile radius of the point for ``date``."""
        params = {"lat": lat, "lng": lng, "date": date}
        logger.info("Fetching crimes lat=%s lng=%s date=%s", lat, lng, date)
        return self._get_json_list(
            "/crimes-street/all-crime",
            timeout=self.crimes_timeout,
            params=params,
            headers={"User-Agent": self.user_agent},
        )

    def fetch_forces(self) -> list[dict[str, Any]]:
        return self._get_json_list("/forces", timeout=self.forces_timeout)


def check_health(client: PoliceAPIClient | None = None) -> bool:
    """Return True if the dates endpoint answers with a list."""
    try:
        (client or PoliceAPIClient()).fetch_dates()
        return True
    except UpstreamError:
        return False
