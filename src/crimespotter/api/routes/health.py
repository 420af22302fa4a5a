"""Health endpoints."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, status

from ...config import Settings
from ...schemas.site import HealthResponse
from ...services.police.client import check_health
from ..dependencies import get_settings

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def health_root(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Liveness probe that does not touch the upstream API."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service=settings.app_name,
        version=settings.version,
        uptime=time.monotonic() - _STARTED_AT,
    )


@router.get("/health/upstream", status_code=status.HTTP_200_OK)
def health_upstream(request: Request) -> dict:
    """Check that the police API answers the dates endpoint."""
    healthy = check_health(request.app.state.police_client)
    entry = request.app.state.dates_cache.peek()
    return {
        "service": "data.police.uk",
        "healthy": healthy,
        "cached_date": entry.value if entry else None,
    }
