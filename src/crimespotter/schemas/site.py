"""Schemas for search, contact, city and health endpoints."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel


class SuggestionModel(BaseModel):
    name: str
    coords: list[float]


class SearchResponse(BaseModel):
    suggestions: List[SuggestionModel]


class ContactRequest(BaseModel):
    # Loosely typed so missing or odd values reach the form validator instead of a 422.
    name: Any = None
    email: Any = None
    subject: Any = None
    message: Any = None


class ContactResponse(BaseModel):
    success: bool = True
    message: str


class CityModel(BaseModel):
    slug: str
    name: str
    lat: float
    lng: float
    region: str


class CitiesResponse(BaseModel):
    success: bool = True
    cities: List[CityModel]


class CityResponse(BaseModel):
    success: bool = True
    city: CityModel


class CityPageModel(BaseModel):
    title: str
    cityName: str
    cityLat: float
    cityLng: float
    cityRegion: str


class CitiesPageModel(BaseModel):
    title: str
    cities: dict[str, CityModel]


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str
    version: str
    uptime: float
