"""Crime, reporting date and police force endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status

from ...config import Settings
from ...errors import InternalError
from ...schemas.crimes import BoundsModel, CrimesResponse, DatesResponse, ErrorResponse, ForcesResponse
from ...services.crimes import CrimeQueryService
from ...services.police import UpstreamError
from ..dependencies import get_crime_service, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["crimes"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    status.HTTP_504_GATEWAY_TIMEOUT: {"model": ErrorResponse},
}


@router.get("/crimes", response_model=CrimesResponse, responses=_ERROR_RESPONSES)
def get_crimes(
    lat: str | None = Query(default=None, description="Latitude in decimal degrees"),
    lng: str | None = Query(default=None, description="Longitude in decimal degrees"),
    date: str | None = Query(default=None, description="Reporting month (YYYY-MM); latest if omitted"),
    service: CrimeQueryService = Depends(get_crime_service),
    settings: Settings = Depends(get_settings),
) -> CrimesResponse:
    result = service.get_crimes(
        lat if lat is not None else settings.default_latitude,
        lng if lng is not None else settings.default_longitude,
        date,
    )
    bounds = result.bounds
    return CrimesResponse(
        location=result.location,
        date=result.date,
        count=result.count,
        crimes=result.crimes,
        categories=result.categories,
        bounds=BoundsModel(north=bounds.north, south=bounds.south, east=bounds.east, west=bounds.west)
        if bounds
        else None,
        sample=result.sample,
        message=result.message,
    )


@router.get("/dates", response_model=DatesResponse)
def get_dates(service: CrimeQueryService = Depends(get_crime_service)) -> DatesResponse:
    try:
        return DatesResponse(**service.get_dates())
    except UpstreamError as exc:
        logger.error("/api/dates error: %s", exc.message)
        raise InternalError("Unable to fetch available dates", details=exc.message) from exc


@router.get("/forces", response_model=ForcesResponse)
def get_forces(service: CrimeQueryService = Depends(get_crime_service)) -> ForcesResponse:
    try:
        return ForcesResponse(forces=service.get_forces())
    except UpstreamError as exc:
        logger.error("/api/forces error: %s", exc.message)
        raise InternalError("Unable to fetch police forces", details=exc.message) from exc
