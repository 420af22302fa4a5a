"""Crime, dates and forces API schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class BoundsModel(BaseModel):
    north: float
    south: float
    east: float
    west: float


class CrimesResponse(BaseModel):
    success: bool = True
    location: str
    date: str
    count: int
    crimes: list[dict[str, Any]]
    categories: dict[str, int]
    bounds: BoundsModel | None = None
    sample: dict[str, Any] | None = None
    message: str | None = None


class DatesResponse(BaseModel):
    success: bool = True
    dates: list[dict[str, Any]]
    latest: str | None = None


class ForcesResponse(BaseModel):
    success: bool = True
    forces: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: str | None = None
