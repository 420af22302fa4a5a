"""Request-scoped accessors for objects owned by the application."""

from __future__ import annotations

from fastapi import Request

from ..config import Settings
from ..services.crimes import CrimeQueryService
from ..services.police import DatesCache


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dates_cache(request: Request) -> DatesCache:
    return request.app.state.dates_cache


def get_crime_service(request: Request) -> CrimeQueryService:
    return request.app.state.crime_service
